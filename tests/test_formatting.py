"""Tests for month/weekday names and BS date formatting."""

import pytest

from bs_date.dates import BSDate
from bs_date.exceptions import BSDateOutOfRange, InvalidOptionCombination
from bs_date.formatting import (
    MONTHS,
    WEEKDAYS,
    WEEKDAYS_LOCAL,
    NameForm,
    format_bs_date,
    month_name,
    weekday_name,
)


class TestNameLists:
    """Tests for the static name lists."""

    def test_list_lengths(self):
        assert len(MONTHS) == 12
        assert len(WEEKDAYS) == 7
        assert len(WEEKDAYS_LOCAL) == 7

    def test_order(self):
        assert MONTHS[0] == ('बैशाख', 'Baisakh')
        assert MONTHS[11] == ('चैत', 'Chaitra')
        assert WEEKDAYS[0] == ('आइतबार', 'Aaitabar')
        assert WEEKDAYS_LOCAL[6] == 'Saturday'


class TestNameForm:
    """Tests for the NameForm option type."""

    def test_from_flags(self):
        assert NameForm.from_flags() is NameForm.NEPALI
        assert NameForm.from_flags(romanized=True) is NameForm.ROMANIZED
        assert NameForm.from_flags(localized=True) is NameForm.LOCALIZED

    def test_from_flags_rejects_both(self):
        with pytest.raises(InvalidOptionCombination):
            NameForm.from_flags(romanized=True, localized=True)

    def test_parse(self):
        assert NameForm.parse('Romanized') is NameForm.ROMANIZED
        assert NameForm.parse(NameForm.LOCALIZED) is NameForm.LOCALIZED

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            NameForm.parse('latin')


class TestNames:
    """Tests for month_name and weekday_name."""

    def test_month_name(self):
        assert month_name(5) == 'भाद्र'
        assert month_name(5, NameForm.ROMANIZED) == 'Bhadra'

    def test_localized_month_falls_back_to_romanized(self):
        assert month_name(1, NameForm.LOCALIZED) == 'Baisakh'

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(BSDateOutOfRange):
            month_name(month)

    def test_weekday_name(self):
        assert weekday_name(3) == 'बुधबार'
        assert weekday_name(3, NameForm.ROMANIZED) == 'Budhbar'
        assert weekday_name(3, 'localized') == 'Wednesday'

    def test_invalid_weekday(self):
        with pytest.raises(ValueError):
            weekday_name(7)


class TestFormatBsDate:
    """Tests for format_bs_date."""

    @pytest.mark.parametrize("style, expected", [
        ('full', 'Bhadra 25, 2082'),
        ('short', 'Bha 25, 2082'),
        ('numeric', '2082/05/25'),
        ('iso', '2082-05-25'),
        ('nepali', 'भाद्र २५, २०८२'),
    ])
    def test_styles(self, style, expected):
        assert format_bs_date(BSDate(2082, 5, 25), style) == expected

    def test_default_style_is_full(self):
        assert format_bs_date(BSDate(2000, 1, 1)) == 'Baisakh 1, 2000'

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_bs_date(BSDate(2082, 5, 25), 'long')
