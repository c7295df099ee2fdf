"""Tests for numeral transliteration."""

import pytest

from bs_date.numerals import (
    ARABIC_DIGITS,
    NEPALI_DIGITS,
    from_localized_numeral,
    to_localized_numeral,
)


class TestToLocalizedNumeral:
    """Tests for to_localized_numeral."""

    @pytest.mark.parametrize("number, expected", [
        (0, "०"),
        (123, "१२३"),
        (2082, "२०८२"),
        (-45, "-४५"),
    ])
    def test_nepali_digits(self, number, expected):
        assert to_localized_numeral(number) == expected

    def test_digit_table_is_a_parameter(self):
        assert to_localized_numeral(2082, ARABIC_DIGITS) == "2082"
        roman_like = {str(digit): chr(ord('a') + digit) for digit in range(10)}
        assert to_localized_numeral(2082, roman_like) == "caic"

    def test_digit_table_is_read_only(self):
        with pytest.raises(TypeError):
            NEPALI_DIGITS['0'] = '0'


class TestFromLocalizedNumeral:
    """Tests for from_localized_numeral."""

    def test_nepali_digits(self):
        assert from_localized_numeral("२०८२") == 2082

    def test_ascii_digits_pass_through(self):
        assert from_localized_numeral("2082") == 2082
        assert from_localized_numeral("२0८2") == 2082

    @pytest.mark.parametrize("text", ["", "-", "12a", "१.५"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            from_localized_numeral(text)
