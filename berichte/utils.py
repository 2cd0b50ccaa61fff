from dateutil import parser as date_parser
from typing import Optional

PLACEHOLDER = '—'


def or_placeholder(value: Optional[str], placeholder: str = PLACEHOLDER) -> str:
    return value if value else placeholder


def format_date_de(raw: Optional[str], placeholder: str = PLACEHOLDER) -> str:
    """
    Formatiert ein Datum wie toLocaleDateString('de-DE'): Tag.Monat.Jahr
    ohne führende Nullen ('2024-03-15' -> '15.3.2024').
    Leeres Datum -> Platzhalter; nicht lesbares Datum bleibt unverändert.
    """
    if not raw:
        return placeholder
    raw = str(raw).strip()
    if not raw:
        return placeholder
    try:
        if len(raw) >= 10 and raw[4] == '-' and raw[7] == '-':
            y, m, day = raw[:10].split('-')
            return f"{int(day)}.{int(m)}.{int(y)}"
    except ValueError:
        pass
    try:
        d = date_parser.parse(raw, dayfirst=True)
        return f"{d.day}.{d.month}.{d.year}"
    except (ValueError, OverflowError):
        return raw


def build_filename(template_name: str, datum: Optional[str], fallback: str = 'neu') -> str:
    return f"{template_name}_{datum or fallback}.pdf"
