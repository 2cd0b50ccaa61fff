# berichte/pdf/templates.py
from typing import List

from berichte.errors import ValidationFailure

from .artifact import BOLD
from .layout import Cursor

FIELDS_TOP = 65.0


def populated_items(items) -> List:
    """Positionen mit Beschreibung, in der eingegebenen Reihenfolge."""
    return [it for it in (items or []) if (getattr(it, 'beschreibung', '') or '').strip()]


class DocumentTemplate:
    name = ''
    title = ''
    company_name = 'ROHRNETZ Beil GmbH'
    columns = ()
    widths = ()
    missing_items_message = ''

    def has_fallback(self, record) -> bool:
        return False

    def validate(self, record) -> None:
        if populated_items(record.items) or self.has_fallback(record):
            return
        raise ValidationFailure(self.missing_items_message)

    def compose_body(self, c, artifact, cursor: Cursor, record) -> Cursor:
        raise NotImplementedError


class LeistungsauftragTemplate(DocumentTemplate):
    name = 'Leistungsauftrag'
    title = 'Leistungsauftrag'
    company_name = 'ROHRNETZ Beil GmbH'
    columns = (
        ('Beschreibung', 'beschreibung'),
        ('Einheit/Netto', 'einheit_netto'),
        ('Std./Stück', 'stunden_stueck'),
        ('m³/m', 'm3m'),
        ('km', 'km'),
        ('Bemerkung', 'bemerkung'),
    )
    widths = (40, 25, 22, 20, 15, None)
    missing_items_message = 'Bitte fügen Sie mindestens eine Leistungsposition hinzu.'

    def compose_body(self, c, artifact, cursor, record):
        cursor = cursor.at_least(FIELDS_TOP)
        y = cursor.y
        c.field(artifact, cursor, 'Einsatzort:', c.value(record.einsatzort), (20, y), (50, y))
        c.field(artifact, cursor, 'Datum:', c.date(record.datum), (120, y), (140, y))

        cursor = cursor.advance(8)
        y = cursor.y
        c.field(artifact, cursor, 'RG – Empfänger:', c.value(record.rg_empfaenger), (20, y), (20, y + 5))

        cursor = cursor.advance(13)
        y = cursor.y
        c.field(artifact, cursor, 'Art der Arbeit:', c.value(record.art_der_arbeit), (20, y), (20, y + 5))

        cursor = cursor.advance(15)
        cursor = c.line_items_table(artifact, cursor, populated_items(record.items), self.columns, self.widths)

        y = cursor.y
        c.field(artifact, cursor, 'Monteur:', c.value(record.monteur), (20, y), (20, y + 5))
        c.field(artifact, cursor, 'Telefon Nr.:', c.value(record.telefon_nr), (80, y), (80, y + 5))

        cursor = cursor.advance(13)
        y = cursor.y
        c.field(artifact, cursor, 'Blockschrift:', c.value(record.blockschrift), (20, y), (20, y + 5))

        cursor = cursor.advance(15)
        cursor = c.signatures(artifact, cursor, record)
        cursor = cursor.advance(20)

        if record.sonstiges:
            cursor = cursor.advance(13)
            y = cursor.y
            c.text(artifact, cursor, 20, y, 'Sonstiges:', weight=BOLD)
            c.text(artifact, cursor, 20, y + 5, c.wrap(record.sonstiges, 170))
        return cursor


class TagesberichtTemplate(DocumentTemplate):
    name = 'Tagesbericht'
    title = 'Tagesbericht'
    company_name = 'Rohrnetz Beil GmbH'
    columns = (
        ('Beschreibung', 'beschreibung'),
        ('Menge/Std.', 'menge'),
        ('Einheit', 'einheit'),
    )
    widths = (100, 40, 40)
    missing_items_message = 'Bitte fügen Sie mindestens eine Arbeitsposition oder Art der Arbeit hinzu.'

    # feste Reihenfolge der Gerätezeilen
    equipment = (
        ('Kipper/Montage', 'kipper_montage'),
        ('Minibagger', 'minibagger'),
        ('Radlader', 'radlader'),
        ('MAN - RB 810', 'man_rb810'),
        ('Neusson', 'neusson'),
        ('Container', 'container'),
        ('Atlas', 'atlas'),
        ('Sonstiges', 'sonstiges'),
    )

    def has_fallback(self, record) -> bool:
        return bool(record.art_der_arbeit)

    def compose_body(self, c, artifact, cursor, record):
        cursor = cursor.at_least(FIELDS_TOP)
        y = cursor.y
        c.field(artifact, cursor, 'Datum:', c.date(record.datum), (20, y), (35, y))
        c.field(artifact, cursor, 'Wochentag:', c.value(record.wochentag), (80, y), (103, y))
        c.field(artifact, cursor, 'Auftraggeber:', c.value(record.auftraggeber), (140, y), (165, y))

        cursor = cursor.advance(8)
        y = cursor.y
        c.field(artifact, cursor, 'Ort:', c.value(record.ort), (20, y), (28, y))
        c.field(artifact, cursor, 'Straße/Haus-Nr.:', c.value(record.strasse_haus_nr), (80, y), (110, y))

        cursor = cursor.advance(8)
        y = cursor.y
        c.field(artifact, cursor, 'Monteur/Arbeitszeit:', c.value(record.monteur_arbeitszeit), (20, y), (56, y))
        c.field(artifact, cursor, 'Tel.Nr.:', c.value(record.tel_nr), (140, y), (157, y))

        if record.art_der_arbeit:
            cursor = cursor.advance(10)
            y = cursor.y
            c.field(artifact, cursor, 'Art der Arbeit:', record.art_der_arbeit, (20, y), (20, y + 5))
            cursor = cursor.advance(10)

        items = populated_items(record.items)
        if items:
            cursor = cursor.advance(10)
            cursor = c.line_items_table(artifact, cursor, items, self.columns, self.widths)

        cursor = c.group(artifact, cursor, 'Geräte und Maschinen:',
                         [(label, getattr(record, attr)) for label, attr in self.equipment])

        if record.bs_aufgestellt_am:
            cursor = cursor.advance(5)
            y = cursor.y
            c.field(artifact, cursor, 'BS aufgestellt am:', record.bs_aufgestellt_am, (20, y), (20, y + 5))
            cursor = cursor.advance(10)

        if record.material_beschreibung or record.material_menge:
            cursor = cursor.advance(5)
            c.text(artifact, cursor, 20, cursor.y, 'Materialverbrauch und Maschinenstunden:', weight=BOLD)
            cursor = cursor.advance(5)
            c.text(artifact, cursor, 20, cursor.y, f"Material: {c.value(record.material_beschreibung)}")
            c.text(artifact, cursor, 120, cursor.y, f"Menge: {c.value(record.material_menge)}")
            cursor = cursor.advance(10)

        cursor = cursor.advance(10)
        return c.signatures(artifact, cursor, record)


LEISTUNGSAUFTRAG = LeistungsauftragTemplate()
TAGESBERICHT = TagesberichtTemplate()

TEMPLATES = {
    'leistungsauftrag': LEISTUNGSAUFTRAG,
    'tagesbericht': TAGESBERICHT,
}
