"""
Unit tests for formatting helpers.
"""

import pytest

from berichte.utils import build_filename, format_date_de, or_placeholder


class TestFormatDate:
    @pytest.mark.parametrize("raw,expected", [
        ('2024-03-15', '15.3.2024'),
        ('2024-12-01', '1.12.2024'),
        ('2024-03-15T10:00:00', '15.3.2024'),
        ('05.11.2023', '5.11.2023'),
    ])
    def test_german_without_leading_zeros(self, raw, expected):
        assert format_date_de(raw) == expected

    @pytest.mark.parametrize("raw", ['', None, '   '])
    def test_empty_gives_placeholder(self, raw):
        assert format_date_de(raw) == '—'

    def test_unreadable_stays_as_is(self):
        assert format_date_de('demnächst') == 'demnächst'


class TestPlaceholder:
    def test_value_kept(self):
        assert or_placeholder('Müller') == 'Müller'

    @pytest.mark.parametrize("raw", ['', None])
    def test_empty(self, raw):
        assert or_placeholder(raw) == '—'
        assert or_placeholder(raw, '-') == '-'


class TestFilename:
    def test_with_datum(self):
        assert build_filename('Tagesbericht', '2024-03-15') == 'Tagesbericht_2024-03-15.pdf'

    def test_without_datum(self):
        assert build_filename('Leistungsauftrag', '') == 'Leistungsauftrag_neu.pdf'
        assert build_filename('Leistungsauftrag', None, 'entwurf') == 'Leistungsauftrag_entwurf.pdf'
