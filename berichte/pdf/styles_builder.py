# berichte/pdf/styles_builder.py
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib import colors


def make_styles(config, font_regular, font_bold):
    """
    Erzeugt die Absatzstile für Tabellenzellen.
    Größen und Farben kommen aus der Config.
    """

    def _num(x, fallback):
        try:
            if x is None:
                return float(fallback)
            return float(x)
        except (TypeError, ValueError):
            return float(fallback)

    size = _num(getattr(config, 'TABLE_FONT_SIZE', 9.0), 9.0)
    factor = _num(getattr(config, 'LINE_HEIGHT_FACTOR', 1.15), 1.15)
    text_color = colors.HexColor(getattr(config, 'TABLE_TEXT_HEX', '#1E293B'))

    styles = getSampleStyleSheet()

    def add_or_update(name, **kwargs):
        if name in styles:
            s = styles[name]
            for k, v in kwargs.items():
                setattr(s, k, v)
        else:
            styles.add(ParagraphStyle(name=name, **kwargs))

    add_or_update('cell',
        fontName=font_regular,
        fontSize=size,
        leading=size * factor,
        textColor=text_color,
        alignment=0,
        spaceBefore=0,
        spaceAfter=0
    )

    add_or_update('cell_head',
        fontName=font_bold,
        fontSize=size,
        leading=size * factor,
        textColor=text_color,
        alignment=0,
        spaceBefore=0,
        spaceAfter=0
    )

    return styles
