# berichte/pdf/tables_builder.py
from typing import List, Sequence, Tuple
from xml.sax.saxutils import escape as xml_escape

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, Table, TableStyle

from .artifact import TableBlock
from .layout import Cursor, resolve_column_widths


def sanitize_for_paragraph(text):
    if text is None:
        return ''
    txt = str(text).replace('\r\n', '\n').replace('\r', '\n')
    return xml_escape(txt).replace('\n', '<br/>')


class GridTableBuilder:
    """
    Gittertabelle mit fester Spaltenbreite und hervorgehobener Kopfzeile.

    layout() misst jede Zeile und verteilt die Zeilen auf Seiten:
    passt eine Zeile nicht mehr über den unteren Rand, wird auf der
    nächsten Seite am oberen Rand fortgesetzt und die Kopfzeile wiederholt.
    """

    def __init__(self, config, styles):
        self.config = config
        self.styles = styles
        self.page_w = float(getattr(config, 'PAGE_WIDTH_MM', 210.0))
        self.page_h = float(getattr(config, 'PAGE_HEIGHT_MM', 297.0))
        self.margin = float(getattr(config, 'TABLE_MARGIN_MM', 40 / 72.0 * 25.4))
        self.pad_pt = float(getattr(config, 'TABLE_CELL_PADDING_PT', 5.0))
        self.line_width_mm = float(getattr(config, 'TABLE_LINE_WIDTH_MM', 0.1))
        self.head_fill = colors.HexColor(getattr(config, 'TABLE_HEAD_FILL_HEX', '#E2E8F0'))
        self.line_color = colors.HexColor(getattr(config, 'TABLE_LINE_HEX', '#C8C8C8'))

    @property
    def available_width(self) -> float:
        return self.page_w - 2 * self.margin

    def column_widths(self, widths: Sequence) -> Tuple[float, ...]:
        return resolve_column_widths(widths, self.available_width)

    def _cell(self, text, head=False):
        style = self.styles['cell_head'] if head else self.styles['cell']
        return Paragraph(sanitize_for_paragraph(text), style)

    def row_height(self, cells: Sequence[str], col_widths: Sequence[float], head=False) -> float:
        """Höhe einer Zeile in mm (höchste Zelle plus Innenabstand)."""
        style = self.styles['cell_head'] if head else self.styles['cell']
        h_pt = float(style.leading)
        for text, w in zip(cells, col_widths):
            if not text:
                continue
            inner_w = max(1.0, w * mm - 2 * self.pad_pt)
            _, ph = self._cell(text, head).wrap(inner_w, 100000)
            h_pt = max(h_pt, float(ph))
        return (h_pt + 2 * self.pad_pt) / mm

    def layout(self, head: Sequence[str], rows: Sequence[Sequence[str]], widths: Sequence,
               cursor: Cursor) -> Tuple[List[TableBlock], Cursor]:
        col_widths = self.column_widths(widths)
        head = tuple(str(h) for h in head)
        head_h = self.row_height(head, col_widths, head=True)
        top = self.margin
        bottom = self.page_h - self.margin

        fragments: List[TableBlock] = []
        start = cursor
        current: List[Tuple[str, ...]] = []
        heights: List[float] = []

        def flush():
            fragments.append(TableBlock(start.page, self.margin, start.y, col_widths, head,
                                        tuple(current), (head_h,) + tuple(heights)))

        for row in rows:
            row = tuple('' if v is None else str(v) for v in row)
            h = self.row_height(row, col_widths)
            used = head_h + sum(heights)
            if start.y + used + h > bottom:
                if current:
                    flush()
                    start = start.next_page(top)
                    current, heights = [], []
                elif start.y > top:
                    # nicht einmal Kopf + erste Zeile passen: ganze Tabelle umbrechen
                    start = start.next_page(top)
            current.append(row)
            heights.append(h)

        if current or not fragments:
            flush()

        last = fragments[-1]
        return fragments, Cursor(last.page, last.y + last.height)

    def build_table(self, block: TableBlock) -> Table:
        data = [[self._cell(h, head=True) for h in block.head]]
        for row in block.rows:
            data.append([self._cell(v) for v in row])

        table = Table(data,
                      colWidths=[w * mm for w in block.column_widths],
                      rowHeights=[h * mm for h in block.row_heights])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), self.head_fill),
            ('GRID', (0, 0), (-1, -1), self.line_width_mm * mm, self.line_color),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), self.pad_pt),
            ('RIGHTPADDING', (0, 0), (-1, -1), self.pad_pt),
            ('TOPPADDING', (0, 0), (-1, -1), self.pad_pt),
            ('BOTTOMPADDING', (0, 0), (-1, -1), self.pad_pt),
        ]))
        return table
