# berichte/pdf/font_manager.py
import logging
import os

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from .artifact import BOLD

logger = logging.getLogger(__name__)


class FontManager:
    """
    Registriert TTF-Schriften, wenn die Pfade aus der Config existieren.
    Sonst bleiben die PDF-Standardschriften Helvetica / Helvetica-Bold.
    Verwendung:
        fm = FontManager(config)
        fm.font_for('bold')
    """

    def __init__(self, config=None):
        self.FONT_REGULAR = 'Helvetica'
        self.FONT_BOLD = 'Helvetica-Bold'
        self._setup_fonts(config)

    def _register(self, name, path):
        if not name or not path or not os.path.exists(path):
            return False
        if name in pdfmetrics.getRegisteredFontNames():
            return True
        try:
            pdfmetrics.registerFont(TTFont(name, path))
            return True
        except (TTFError, OSError) as e:
            logger.warning("Schrift %s konnte nicht registriert werden (%s): %s", name, path, e)
            return False

    def _setup_fonts(self, config=None):
        if config is None:
            return
        reg_name = getattr(config, 'FONT_REGULAR_NAME', None)
        bold_name = getattr(config, 'FONT_BOLD_NAME', None)

        # beide oder keine, damit Normal und Fett zusammenpassen
        if self._register(reg_name, getattr(config, 'FONT_REGULAR_PATH', None)) and \
                self._register(bold_name, getattr(config, 'FONT_BOLD_PATH', None)):
            self.FONT_REGULAR = reg_name
            self.FONT_BOLD = bold_name

    def font_for(self, weight: str) -> str:
        return self.FONT_BOLD if weight == BOLD else self.FONT_REGULAR
