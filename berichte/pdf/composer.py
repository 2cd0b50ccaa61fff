# berichte/pdf/composer.py
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from berichte.config import Config
from berichte.utils import build_filename, format_date_de, or_placeholder

from .artifact import Artifact, BOLD, NORMAL
from .font_manager import FontManager
from .header_drawer import HeaderDrawer
from .layout import Cursor, emit_field, emit_text
from .signature_drawer import SignatureDrawer
from .styles_builder import make_styles
from .tables_builder import GridTableBuilder

logger = logging.getLogger(__name__)

LEFT_X = 20.0
GROUP_STEP = 5.0


class DocumentComposer:
    """
    Bildet einen validierten Bericht deterministisch auf ein Artifact ab.

    compose() verändert den Bericht nicht und hält keinen Zustand
    zwischen zwei Aufrufen. Der Ablauf:
      1. Prüfung (template.validate); bei Fehler ValidationFailure, kein Artifact
      2. Firmenkopf, 3. Titel
      4.–7. template.compose_body: Kopffelder, Positionstabelle,
            bedingte Abschnitte, Unterschriften
    Der Cursor wird durch jeden Schritt gereicht und kommt verändert zurück.
    """

    def __init__(self, template, config=Config):
        self.template = template
        self.config = config

        self.fonts = FontManager(config)
        styles = make_styles(config, self.fonts.FONT_REGULAR, self.fonts.FONT_BOLD)
        self.tables = GridTableBuilder(config, styles)
        self.header = HeaderDrawer(config)
        self.signature_drawer = SignatureDrawer(config)

        self.size = float(getattr(config, 'FIELD_FONT_SIZE', 9.0))
        self.placeholder = getattr(config, 'PLACEHOLDER', '—')
        self.filename_fallback = getattr(config, 'FILENAME_FALLBACK', 'neu')
        self.after_table = float(getattr(config, 'TABLE_AFTER_PADDING_MM', 10.0))
        self.page_size = (float(getattr(config, 'PAGE_WIDTH_MM', 210.0)),
                          float(getattr(config, 'PAGE_HEIGHT_MM', 297.0)))

    def filename(self, record) -> str:
        return build_filename(self.template.name, getattr(record, 'datum', ''), self.filename_fallback)

    def compose(self, record) -> Artifact:
        self.template.validate(record)

        artifact = Artifact(title=self.template.title, filename=self.filename(record), page_size=self.page_size)
        cursor = Cursor(1, 0.0)
        cursor = self.header.draw_header(artifact, cursor, self.template.company_name)
        cursor = self.header.draw_title(artifact, cursor, self.template.title)
        cursor = self.template.compose_body(self, artifact, cursor, record)

        logger.debug("%s komponiert: %d Blöcke, %d Seite(n), Cursor %s",
                     self.template.name, len(artifact.blocks), artifact.page_count, cursor)
        return artifact

    # -------------------------
    # Bausteine für die Vorlagen
    # -------------------------
    def value(self, v: Optional[str]) -> str:
        return or_placeholder(v, self.placeholder)

    def date(self, v: Optional[str]) -> str:
        return format_date_de(v, self.placeholder)

    def text(self, artifact: Artifact, cursor: Cursor, x: float, y: float, text, weight: str = NORMAL) -> None:
        emit_text(artifact, cursor, x, y, text, weight=weight, size=self.size)

    def field(self, artifact: Artifact, cursor: Cursor, label: str, value: str,
              label_at: Tuple[float, float], value_at: Tuple[float, float]) -> None:
        emit_field(artifact, cursor, label, value, label_at, value_at, size=self.size)

    def wrap(self, text: str, width_mm: float) -> List[str]:
        return simpleSplit(str(text), self.fonts.FONT_REGULAR, self.size, width_mm * mm)

    def line_items_table(self, artifact: Artifact, cursor: Cursor, items: Sequence,
                         columns: Sequence[Tuple[str, str]], widths: Sequence) -> Cursor:
        """
        Positionstabelle; ohne Positionen wird nichts ausgegeben.
        Danach steht der Cursor unter dem Tabellenende plus Abstand.
        """
        if not items:
            return cursor
        head = [label for label, _ in columns]
        rows = [tuple(getattr(it, attr, '') or '' for _, attr in columns) for it in items]
        blocks, end = self.tables.layout(head, rows, widths, cursor)
        for block in blocks:
            artifact.add(block)
        return end.advance(self.after_table)

    def group(self, artifact: Artifact, cursor: Cursor, heading: str,
              entries: Iterable[Tuple[str, str]]) -> Cursor:
        """Abschnitt nur, wenn mindestens ein Eintrag gefüllt ist; dann nur die gefüllten."""
        populated = [(label, value) for label, value in entries if value]
        if not populated:
            return cursor
        cursor = cursor.advance(GROUP_STEP)
        self.text(artifact, cursor, LEFT_X, cursor.y, heading, weight=BOLD)
        cursor = cursor.advance(GROUP_STEP)
        for label, value in populated:
            self.text(artifact, cursor, LEFT_X, cursor.y, f"{label}: {value}")
            cursor = cursor.advance(GROUP_STEP)
        return cursor

    def signatures(self, artifact: Artifact, cursor: Cursor, record) -> Cursor:
        return self.signature_drawer.draw_signatures(
            artifact, cursor,
            getattr(record, 'signatur_kunde', '') or '',
            getattr(record, 'signatur_mitarbeiter', '') or '',
        )
