# berichte/pdf/layout.py
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from .artifact import Artifact, TextBlock, BOLD, NORMAL


@dataclass(frozen=True, order=True)
class Cursor:
    """
    Laufende vertikale Position (mm) auf einer Seite.
    Wird nur vorwärts bewegt: innerhalb der Seite nach unten,
    sonst auf den Anfang der nächsten Seite.
    """
    page: int = 1
    y: float = 0.0

    def advance(self, dy: float) -> 'Cursor':
        if dy < 0:
            raise ValueError(f"Cursor kann nicht zurückgesetzt werden (dy={dy})")
        return replace(self, y=self.y + dy)

    def at_least(self, y: float) -> 'Cursor':
        return replace(self, y=max(self.y, y))

    def next_page(self, top: float) -> 'Cursor':
        return Cursor(self.page + 1, top)


def emit_text(artifact: Artifact, cursor: Cursor, x: float, y: float, text,
              weight: str = NORMAL, size: float = 9.0, align: str = 'left') -> TextBlock:
    """Schreibt Text auf die Seite des Cursors; text darf eine Zeilenliste sein."""
    if isinstance(text, (list, tuple)):
        lines: Tuple[str, ...] = tuple(str(t) for t in text)
    else:
        lines = (str(text),)
    block = TextBlock(cursor.page, x, y, lines, weight=weight, size=size, align=align)
    artifact.add(block)
    return block


def emit_field(artifact: Artifact, cursor: Cursor, label: str, value: str,
               label_at: Tuple[float, float], value_at: Tuple[float, float],
               size: float = 9.0) -> None:
    emit_text(artifact, cursor, label_at[0], label_at[1], label, weight=BOLD, size=size)
    emit_text(artifact, cursor, value_at[0], value_at[1], value, weight=NORMAL, size=size)


def resolve_column_widths(widths: Sequence, available: float) -> Tuple[float, ...]:
    """
    Feste Spaltenbreiten in mm; None steht für 'Restbreite'.
    Mehrere None-Spalten teilen sich die Restbreite gleichmäßig.
    """
    fixed = sum(w for w in widths if w is not None)
    auto = [w for w in widths if w is None]
    rest = max(0.0, available - fixed)
    each = rest / len(auto) if auto else 0.0
    return tuple(float(w) if w is not None else each for w in widths)
