"""Tests for the bs_date system checks."""

from django.test import override_settings

from bs_date.checks import check_settings


class TestCheckSettings:
    """Tests for check_settings."""

    def test_defaults_are_valid(self):
        assert check_settings(None) == []

    @override_settings(BS_DATE_NAME_FORM='latin', BS_DATE_FORMAT='long', BS_DATE_NUMERALS='roman')
    def test_invalid_settings(self):
        ids = [error.id for error in check_settings(None)]
        assert ids == ['bs_date.E001', 'bs_date.E002', 'bs_date.E003']
