"""
Django settings for bs_date, with package defaults

Settings:
    BS_DATE_NAME_FORM: 'nepali', 'romanized' or 'localized' names in templates
    BS_DATE_FORMAT: default style for the bs_format filter and bs_today tag
    BS_DATE_NUMERALS: 'devanagari' or 'arabic' digits for the bs_numeral filter
"""
from datetime import date

from django.conf import settings
from django.utils import timezone

from .numerals import ARABIC_DIGITS, NEPALI_DIGITS

DEFAULTS = {
    'NAME_FORM': 'nepali',
    'FORMAT': 'full',
    'NUMERALS': 'devanagari',
}

NUMERAL_TABLES = {
    'devanagari': NEPALI_DIGITS,
    'arabic': ARABIC_DIGITS,
}


def get_setting(name):
    return getattr(settings, f'BS_DATE_{name}', DEFAULTS[name])


def numeral_table():
    return NUMERAL_TABLES[get_setting('NUMERALS')]


def local_today() -> date:
    """Today's date in the project's current time zone"""
    if settings.USE_TZ:
        return timezone.localdate()
    return date.today()
