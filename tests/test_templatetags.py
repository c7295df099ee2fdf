"""Tests for the bs_date_tags template library."""

from datetime import date
from unittest import mock

from django.template import Context, Template
from django.test import override_settings

from bs_date.dates import BSDate


def render(source, **context):
    return Template("{% load bs_date_tags %}" + source).render(Context(context))


class TestFilters:
    """Tests for the template filters."""

    def test_to_bs(self):
        assert render("{{ d|to_bs }}", d=date(2025, 9, 10)) == "2082-05-25"

    def test_to_bs_out_of_range_renders_empty(self):
        assert render("{{ d|to_bs }}", d=date(1900, 1, 1)) == ""

    def test_to_bs_none(self):
        assert render("{{ d|to_bs }}", d=None) == ""

    def test_bs_format_default(self):
        assert render("{{ d|bs_format }}", d=date(2025, 9, 10)) == "Bhadra 25, 2082"

    def test_bs_format_style(self):
        assert render('{{ d|bs_format:"nepali" }}', d=BSDate(2082, 5, 25)) == "भाद्र २५, २०८२"

    @override_settings(BS_DATE_FORMAT='numeric')
    def test_bs_format_setting(self):
        assert render("{{ d|bs_format }}", d=BSDate(2082, 5, 25)) == "2082/05/25"

    def test_bs_format_invalid_date_renders_empty(self):
        assert render("{{ d|bs_format }}", d=BSDate(2082, 13, 1)) == ""

    def test_malformed_string_renders_empty(self):
        assert render("{{ d|to_bs }}", d="not-a-date") == ""
        assert render("{{ d|bs_format }}", d="2025/09/10") == ""
        assert render("{{ d|bs_day_name }}", d="2025/09/10") == ""

    def test_unknown_style_renders_empty(self):
        assert render('{{ d|bs_format:"bogus" }}', d=BSDate(2082, 5, 25)) == ""

    def test_unknown_name_form_renders_empty(self):
        assert render('{{ d|bs_month_name:"bogus" }}', d=BSDate(2082, 5, 25)) == ""
        assert render('{{ d|bs_day_name:"bogus" }}', d=BSDate(2082, 5, 18)) == ""

    def test_bs_month_name(self):
        assert render("{{ d|bs_month_name }}", d=BSDate(2082, 5, 25)) == "भाद्र"
        assert render('{{ m|bs_month_name:"romanized" }}', m=12) == "Chaitra"

    @override_settings(BS_DATE_NAME_FORM='romanized')
    def test_bs_month_name_setting(self):
        assert render("{{ d|bs_month_name }}", d=date(2025, 9, 10)) == "Bhadra"

    def test_bs_day_name(self):
        assert render('{{ d|bs_day_name:"localized" }}', d=BSDate(2082, 5, 18)) == "Wednesday"
        assert render("{{ d|bs_day_name }}", d=BSDate(2082, 5, 18)) == "बुधबार"

    def test_bs_numeral(self):
        assert render("{{ n|bs_numeral }}", n=2082) == "२०८२"

    @override_settings(BS_DATE_NUMERALS='arabic')
    def test_bs_numeral_arabic(self):
        assert render("{{ n|bs_numeral }}", n=2082) == "2082"

    def test_bs_numeral_non_number(self):
        assert render("{{ n|bs_numeral }}", n="abc") == "abc"


class TestBsTodayTag:
    """Tests for the bs_today tag."""

    def test_bs_today(self):
        target = 'bs_date.templatetags.bs_date_tags.local_today'
        with mock.patch(target, return_value=date(2025, 9, 10)):
            assert render('{% bs_today "iso" %}') == "2082-05-25"
            assert render('{% bs_today %}') == "Bhadra 25, 2082"
