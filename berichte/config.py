# config.py
import os


class Config:
    """
    Zentrale Konfiguration: alle Maße, Schriften und Farben der PDFs
    werden hier eingestellt.
    Koordinaten und Längen sind in Millimetern (A4-Seite 210 x 297),
    Schriftgrößen in Punkten.
    """

    # -------------------------
    # Verzeichnisse / Pfade
    # -------------------------
    BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    LOG_PATH = os.environ.get('BERICHTE_LOG_PATH') or os.path.join(os.path.dirname(BASE_DIR), 'app.log')

    # -------------------------
    # Schriften
    # -------------------------
    # Optionale TTF-Dateien; fehlen sie, bleibt es bei Helvetica
    FONT_REGULAR_PATH = os.path.join(BASE_DIR, 'static', 'fonts', 'DejaVuSans.ttf')
    FONT_BOLD_PATH = os.path.join(BASE_DIR, 'static', 'fonts', 'DejaVuSans-Bold.ttf')
    FONT_REGULAR_NAME = 'DejaVuSans'
    FONT_BOLD_NAME = 'DejaVuSans-Bold'

    COMPANY_FONT_SIZE = 14.0
    ADDRESS_FONT_SIZE = 9.0
    LOGO_SMALL_FONT_SIZE = 10.0
    TITLE_FONT_SIZE = 16.0
    FIELD_FONT_SIZE = 9.0
    TABLE_FONT_SIZE = 9.0
    LINE_HEIGHT_FACTOR = 1.15

    # -------------------------
    # Seite (mm)
    # -------------------------
    PAGE_WIDTH_MM = 210.0
    PAGE_HEIGHT_MM = 297.0
    # Tabellenränder links/rechts und oben/unten auf Folgeseiten (40 pt)
    TABLE_MARGIN_MM = 40 / 72.0 * 25.4
    # Zellenabstand in Punkten
    TABLE_CELL_PADDING_PT = 5.0
    TABLE_LINE_WIDTH_MM = 0.1
    # Abstand nach einer Tabelle bis zum nächsten Block
    TABLE_AFTER_PADDING_MM = 10.0

    # -------------------------
    # Farben
    # -------------------------
    TABLE_HEAD_FILL_HEX = '#E2E8F0'
    TABLE_TEXT_HEX = '#1E293B'
    TABLE_LINE_HEX = '#C8C8C8'

    # -------------------------
    # Firmenkopf (statischer Text)
    # -------------------------
    COMPANY_ADDRESS_LINES = ('Luisenstr. 10', '02943 Weißwasser', 'Tel.: 03576/283288')
    LOGO_LINES = ('ROHRNETZ', 'Beil')

    PLACEHOLDER = '—'
    FILENAME_FALLBACK = 'neu'

    # -------------------------
    # Unterschriften
    # -------------------------
    SIGNATURE_WIDTH = 400
    SIGNATURE_HEIGHT = 120
    SIGNATURE_STROKE_WIDTH = 2
    SIGNATURE_STROKE_COLOR = (0, 0, 0, 255)
    # eingebettete Größe im PDF (mm)
    SIGNATURE_IMAGE_W_MM = 50.0
    SIGNATURE_IMAGE_H_MM = 15.0

    # -------------------------
    # Sonstiges
    # -------------------------
    DEBUG = os.environ.get('BERICHTE_DEBUG', '').strip().lower() in ('1', 'true', 'yes', 'on')
    TESTING = False
