# berichte/pdf/artifact.py
"""
Logische Bausteine eines Dokuments. Alle Positionen in Millimetern,
Ursprung oben links; y ist bei Text die Grundlinie, bei Bildern und
Tabellen die Oberkante.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BOLD = 'bold'
NORMAL = 'normal'


@dataclass(frozen=True)
class TextBlock:
    page: int
    x: float
    y: float
    lines: Tuple[str, ...]
    weight: str = NORMAL
    size: float = 9.0
    align: str = 'left'

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)


@dataclass(frozen=True)
class TableBlock:
    page: int
    x: float
    y: float
    column_widths: Tuple[float, ...]
    head: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    # Höhe der Kopfzeile gefolgt von den Zeilenhöhen (mm)
    row_heights: Tuple[float, ...]

    @property
    def height(self) -> float:
        return sum(self.row_heights)

    @property
    def width(self) -> float:
        return sum(self.column_widths)


@dataclass(frozen=True)
class ImageBlock:
    page: int
    x: float
    y: float
    width: float
    height: float
    data: bytes
    fmt: str = 'PNG'


@dataclass
class Artifact:
    title: str
    filename: str
    page_size: Tuple[float, float] = (210.0, 297.0)
    blocks: List[object] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        if not self.blocks:
            return 1
        return max(getattr(b, 'page', 1) for b in self.blocks)

    def add(self, block) -> None:
        self.blocks.append(block)

    def texts(self, page: Optional[int] = None) -> List[TextBlock]:
        return [b for b in self.blocks if isinstance(b, TextBlock) and (page is None or b.page == page)]

    def tables(self) -> List[TableBlock]:
        return [b for b in self.blocks if isinstance(b, TableBlock)]

    def images(self) -> List[ImageBlock]:
        return [b for b in self.blocks if isinstance(b, ImageBlock)]
