"""
Unit tests for the Tagesbericht layout.
"""

import pytest

from berichte.errors import ValidationFailure
from berichte.models import ArbeitsItem
from berichte.pdf.artifact import BOLD
from berichte.pdf.composer import DocumentComposer
from berichte.pdf.templates import TAGESBERICHT


@pytest.fixture
def composer(test_config):
    return DocumentComposer(TAGESBERICHT, test_config)


def _find(artifact, text):
    for block in artifact.texts():
        if text in block.lines:
            return block
    return None


def _at(artifact, text):
    block = _find(artifact, text)
    assert block is not None, f"Text fehlt: {text}"
    return block


class TestFields:
    def test_header_uses_mixed_case_company(self, composer, tagesbericht_record):
        artifact = composer.compose(tagesbericht_record)
        assert _at(artifact, 'Rohrnetz Beil GmbH').y == 20
        assert _at(artifact, 'Tagesbericht').align == 'center'

    def test_three_field_rows(self, composer, tagesbericht_record):
        artifact = composer.compose(tagesbericht_record)

        assert (_at(artifact, 'Datum:').x, _at(artifact, 'Datum:').y) == (20, 65)
        assert (_at(artifact, '15.3.2024').x, _at(artifact, '15.3.2024').y) == (35, 65)
        assert (_at(artifact, 'Freitag').x, _at(artifact, 'Freitag').y) == (103, 65)
        assert (_at(artifact, 'Auftraggeber:').x, _at(artifact, 'Auftraggeber:').y) == (140, 65)
        assert _at(artifact, 'Stadtwerke Weißwasser').x == 165

        assert (_at(artifact, 'Ort:').x, _at(artifact, 'Ort:').y) == (20, 73)
        assert (_at(artifact, 'Weißwasser').x, _at(artifact, 'Weißwasser').y) == (28, 73)
        assert _at(artifact, 'Straße/Haus-Nr.:').x == 80

        assert _at(artifact, 'Monteur/Arbeitszeit:').y == 81
        assert (_at(artifact, 'Tel.Nr.:').x, _at(artifact, 'Tel.Nr.:').y) == (140, 81)

        placeholders = [(b.x, b.y) for b in artifact.texts() if b.lines == ('—',)]
        assert (110, 73) in placeholders
        assert (56, 81) in placeholders
        assert (157, 81) in placeholders


class TestWorkSection:
    def test_table_without_art_der_arbeit(self, composer, tagesbericht_record):
        artifact = composer.compose(tagesbericht_record)
        (table,) = artifact.tables()

        assert _find(artifact, 'Art der Arbeit:') is None
        assert table.y == 91
        assert table.head == ('Beschreibung', 'Menge/Std.', 'Einheit')
        assert table.column_widths == (100, 40, 40)
        assert table.rows == (('Graben ausheben', '3', 'Std.'),)

    def test_art_der_arbeit_pushes_table_down(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={'art_der_arbeit': 'Rohrbruch beheben'})
        artifact = composer.compose(record)

        label = _at(artifact, 'Art der Arbeit:')
        assert (label.y, label.weight) == (91, BOLD)
        assert _at(artifact, 'Rohrbruch beheben').y == 96
        (table,) = artifact.tables()
        assert table.y == 111

    def test_art_der_arbeit_alone_is_enough(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={'art_der_arbeit': 'Rohrbruch beheben', 'items': []})
        artifact = composer.compose(record)

        assert artifact.tables() == []
        assert _at(artifact, 'Unterschrift Kunde:').y == 111

    @pytest.mark.parametrize("items", [[], [ArbeitsItem(id='1', beschreibung='', menge='2')]])
    def test_neither_items_nor_art_der_arbeit_fails(self, composer, tagesbericht_record, items):
        record = tagesbericht_record.model_copy(update={'items': items})
        with pytest.raises(ValidationFailure) as exc:
            composer.compose(record)
        assert exc.value.message == 'Bitte fügen Sie mindestens eine Arbeitsposition oder Art der Arbeit hinzu.'


class TestOptionalSections:
    def test_only_populated_equipment_in_fixed_order(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={
            'atlas': '1 Std.',
            'minibagger': '2 Std.',
        })
        artifact = composer.compose(record)
        (table,) = artifact.tables()

        heading = _at(artifact, 'Geräte und Maschinen:')
        assert heading.weight == BOLD
        assert heading.y == pytest.approx(table.y + table.height + 10 + 5)

        minibagger = _at(artifact, 'Minibagger: 2 Std.')
        atlas = _at(artifact, 'Atlas: 1 Std.')
        assert minibagger.y == pytest.approx(heading.y + 5)
        assert atlas.y == pytest.approx(heading.y + 10)
        assert _find(artifact, 'Radlader: ') is None
        assert not any(line.startswith('Kipper/Montage') for b in artifact.texts() for line in b.lines)

    def test_no_equipment_no_heading(self, composer, tagesbericht_record):
        artifact = composer.compose(tagesbericht_record)
        assert _find(artifact, 'Geräte und Maschinen:') is None

    def test_bs_section(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={'bs_aufgestellt_am': '12.03.2024'})
        artifact = composer.compose(record)
        (table,) = artifact.tables()

        label = _at(artifact, 'BS aufgestellt am:')
        assert label.y == pytest.approx(table.y + table.height + 10 + 5)
        assert _at(artifact, '12.03.2024').y == pytest.approx(label.y + 5)
        assert _at(artifact, 'Unterschrift Kunde:').y == pytest.approx(label.y + 20)

    def test_material_section_with_one_side_filled(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={'material_beschreibung': 'Kies 0/16'})
        artifact = composer.compose(record)

        heading = _at(artifact, 'Materialverbrauch und Maschinenstunden:')
        material = _at(artifact, 'Material: Kies 0/16')
        menge = _at(artifact, 'Menge: —')
        assert material.y == menge.y == pytest.approx(heading.y + 5)
        assert (material.x, menge.x) == (20, 120)

    def test_sections_stack_in_order(self, composer, tagesbericht_record):
        record = tagesbericht_record.model_copy(update={
            'kipper_montage': 'ja',
            'bs_aufgestellt_am': 'Montag',
            'material_menge': '3 t',
        })
        artifact = composer.compose(record)
        ys = [_at(artifact, t).y for t in (
            'Geräte und Maschinen:',
            'Kipper/Montage: ja',
            'BS aufgestellt am:',
            'Materialverbrauch und Maschinenstunden:',
            'Menge: 3 t',
            'Unterschrift Kunde:',
        )]
        assert ys == sorted(ys)
        assert len(set(ys)) == len(ys)


class TestSignatures:
    def test_signatures_below_table(self, composer, tagesbericht_record):
        artifact = composer.compose(tagesbericht_record)
        (table,) = artifact.tables()
        kunde = _at(artifact, 'Unterschrift Kunde:')
        assert kunde.y == pytest.approx(table.y + table.height + 20)
        assert _at(artifact, 'Unterschrift Mitarbeiter:').x == 120

    def test_both_signatures_embedded(self, composer, tagesbericht_record, signature_payload):
        record = tagesbericht_record.model_copy(update={
            'signatur_kunde': signature_payload,
            'signatur_mitarbeiter': signature_payload,
        })
        artifact = composer.compose(record)
        assert [img.x for img in artifact.images()] == [20, 120]
        assert not any(b.lines == ('—',) and b.x in (20, 120) and b.y > 100 for b in artifact.texts())


def test_filename(composer, tagesbericht_record):
    assert composer.compose(tagesbericht_record).filename == 'Tagesbericht_2024-03-15.pdf'
