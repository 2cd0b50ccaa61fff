# berichte/pdf/renderer.py
import io
import logging

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas

from .artifact import Artifact, ImageBlock, TableBlock, TextBlock

logger = logging.getLogger(__name__)


class PDFRenderer:
    """
    Zeichnet die Blöcke eines Artifacts mit reportlab.
    Umrechnung: Artifact in mm mit Ursprung oben links,
    PDF in Punkten mit Ursprung unten links.
    """

    def __init__(self, fonts, tables, config):
        self.fonts = fonts
        self.tables = tables
        self.line_height = float(getattr(config, 'LINE_HEIGHT_FACTOR', 1.15))
        self.text_color = colors.black
        self.page_h_pt = float(getattr(config, 'PAGE_HEIGHT_MM', 297.0)) * mm

    def render(self, artifact: Artifact) -> bytes:
        buf = io.BytesIO()
        page_w, page_h = artifact.page_size
        self.page_h_pt = page_h * mm
        c = pdf_canvas.Canvas(buf, pagesize=(page_w * mm, page_h * mm))
        c.setTitle(artifact.title)

        for page in range(1, artifact.page_count + 1):
            for block in artifact.blocks:
                if getattr(block, 'page', 1) != page:
                    continue
                if isinstance(block, TextBlock):
                    self._draw_text(c, block)
                elif isinstance(block, TableBlock):
                    self._draw_table(c, block)
                elif isinstance(block, ImageBlock):
                    self._draw_image(c, block)
            c.showPage()

        c.save()
        data = buf.getvalue()
        logger.debug("PDF gerendert: %s (%d Seiten, %d Bytes)", artifact.filename, artifact.page_count, len(data))
        return data

    def _y(self, y_mm: float) -> float:
        return self.page_h_pt - y_mm * mm

    def _draw_text(self, c, block: TextBlock):
        c.saveState()
        c.setFillColor(self.text_color)
        c.setFont(self.fonts.font_for(block.weight), block.size)
        leading = block.size * self.line_height
        x = block.x * mm
        y = self._y(block.y)
        for line in block.lines:
            if block.align == 'center':
                c.drawCentredString(x, y, line)
            elif block.align == 'right':
                c.drawRightString(x, y, line)
            else:
                c.drawString(x, y, line)
            y -= leading
        c.restoreState()

    def _draw_table(self, c, block: TableBlock):
        table = self.tables.build_table(block)
        table.wrapOn(c, block.width * mm, block.height * mm)
        table.drawOn(c, block.x * mm, self._y(block.y + block.height))

    def _draw_image(self, c, block: ImageBlock):
        reader = ImageReader(io.BytesIO(block.data))
        c.drawImage(reader, block.x * mm, self._y(block.y + block.height),
                    width=block.width * mm, height=block.height * mm, mask='auto')
