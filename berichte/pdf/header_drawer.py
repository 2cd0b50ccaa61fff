# berichte/pdf/header_drawer.py
from .artifact import Artifact, BOLD, NORMAL
from .layout import Cursor, emit_text

HEADER_TOP = 20.0
ADDRESS_TOP = 26.0
ADDRESS_STEP = 5.0
LEFT_X = 20.0
RIGHT_X = 190.0
TITLE_X = 105.0
TITLE_Y = 50.0


class HeaderDrawer:
    """
    Statischer Firmenkopf und zentrierter Dokumenttitel.
    Unabhängig vom Inhalt des Berichts; Positionen sind fest.
    """

    def __init__(self, config):
        self.config = config
        self.company_size = float(getattr(config, 'COMPANY_FONT_SIZE', 14.0))
        self.address_size = float(getattr(config, 'ADDRESS_FONT_SIZE', 9.0))
        self.logo_small_size = float(getattr(config, 'LOGO_SMALL_FONT_SIZE', 10.0))
        self.title_size = float(getattr(config, 'TITLE_FONT_SIZE', 16.0))
        self.address_lines = tuple(getattr(config, 'COMPANY_ADDRESS_LINES', ()))
        self.logo_lines = tuple(getattr(config, 'LOGO_LINES', ('ROHRNETZ', 'Beil')))

    def draw_header(self, artifact: Artifact, cursor: Cursor, company_name: str) -> Cursor:
        # links: Firma und Anschrift
        emit_text(artifact, cursor, LEFT_X, HEADER_TOP, company_name, weight=BOLD, size=self.company_size)
        y = ADDRESS_TOP
        for line in self.address_lines:
            emit_text(artifact, cursor, LEFT_X, y, line, weight=NORMAL, size=self.address_size)
            y += ADDRESS_STEP

        # rechts: Schriftzug in zwei Zeilen
        if self.logo_lines:
            emit_text(artifact, cursor, RIGHT_X, HEADER_TOP, self.logo_lines[0],
                      weight=BOLD, size=self.company_size, align='right')
        if len(self.logo_lines) > 1:
            emit_text(artifact, cursor, RIGHT_X, ADDRESS_TOP, self.logo_lines[1],
                      weight=BOLD, size=self.logo_small_size, align='right')
        return cursor.at_least(y - ADDRESS_STEP)

    def draw_title(self, artifact: Artifact, cursor: Cursor, title: str) -> Cursor:
        emit_text(artifact, cursor, TITLE_X, TITLE_Y, title, weight=BOLD, size=self.title_size, align='center')
        return cursor.at_least(TITLE_Y)
