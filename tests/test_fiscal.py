"""Tests for Nepal fiscal year helpers."""

from datetime import date
from unittest import mock

import pytest

from bs_date.dates import BSDate
from bs_date.exceptions import BSDateOutOfRange
from bs_date.fiscal import (
    get_current_fiscal_year,
    get_fiscal_year,
    get_fiscal_year_bs_dates,
    get_fiscal_year_dates,
    parse_fiscal_year,
)


class TestGetFiscalYear:
    """Tests for get_fiscal_year."""

    def test_shrawan_starts_new_fiscal_year(self):
        assert get_fiscal_year(BSDate(2080, 4, 1)) == "2080/81"
        assert get_fiscal_year(BSDate(2080, 3, 32)) == "2079/80"

    def test_ad_date(self):
        assert get_fiscal_year(date(2025, 9, 10)) == "2082/83"
        assert get_fiscal_year('2025-01-01') == "2081/82"

    def test_dict_format(self):
        assert get_fiscal_year(BSDate(2082, 1, 1), format='dict') == {
            'start_year': 2081,
            'end_year': 2082,
        }

    def test_century_boundary(self):
        assert get_fiscal_year(BSDate(2099, 5, 1)) == "2099/00"


class TestFiscalYearDates:
    """Tests for fiscal year date ranges."""

    def test_bs_dates(self):
        assert get_fiscal_year_bs_dates("2080/81") == (BSDate(2080, 4, 1), BSDate(2081, 3, 32))

    def test_ad_dates(self):
        assert get_fiscal_year_dates("2080/81") == (date(2023, 7, 17), date(2024, 7, 15))
        assert get_fiscal_year_dates("2081/82") == (date(2024, 7, 16), date(2025, 7, 15))

    @pytest.mark.parametrize("text", ["2080", "2080-81", "80/81", "2080/82"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            parse_fiscal_year(text)

    def test_parse(self):
        assert parse_fiscal_year(" 2089/90 ") == 2089

    def test_beyond_table(self):
        with pytest.raises(BSDateOutOfRange):
            get_fiscal_year_dates("2090/91")


class TestCurrentFiscalYear:
    """Tests for get_current_fiscal_year."""

    def test_uses_local_today(self):
        with mock.patch('bs_date.conf.local_today', return_value=date(2025, 9, 10)):
            assert get_current_fiscal_year() == "2082/83"
