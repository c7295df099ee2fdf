import logging

from django import template

from bs_date.conf import get_setting, local_today, numeral_table
from bs_date.dates import BSDate
from bs_date.formatting import NameForm, format_bs_date, month_name, weekday_name
from bs_date.numerals import to_localized_numeral

logger = logging.getLogger(__name__)

register = template.Library()


def _as_bs_date(value):
    if isinstance(value, BSDate):
        return value
    return BSDate.from_ad(value)


@register.filter
def to_bs(value):
    """
    Converts an AD date to a BSDate.
    Usage: {{ obj.created_at|to_bs }}
    """
    if value in (None, ''):
        return ''
    try:
        return _as_bs_date(value)
    except (ValueError, TypeError) as e:
        logger.debug("to_bs failed for %r: %s", value, e)
        return ''


@register.filter
def bs_format(value, style=None):
    """
    Formats a BSDate or AD date in a BS style.
    Usage: {{ obj.created_at|bs_format:"nepali" }}
    """
    if value in (None, ''):
        return ''
    try:
        return format_bs_date(_as_bs_date(value), style or get_setting('FORMAT'))
    except (ValueError, TypeError) as e:
        logger.debug("bs_format failed for %r: %s", value, e)
        return ''


@register.filter
def bs_month_name(value, form=None):
    """Month name of a BSDate, AD date or month number (1-12)."""
    if value in (None, ''):
        return ''
    try:
        form = NameForm.parse(form or get_setting('NAME_FORM'))
        month = value if isinstance(value, int) else _as_bs_date(value).month
        return month_name(month, form)
    except (ValueError, TypeError) as e:
        logger.debug("bs_month_name failed for %r: %s", value, e)
        return ''


@register.filter
def bs_day_name(value, form=None):
    """Weekday name of a BSDate or AD date."""
    if value in (None, ''):
        return ''
    try:
        form = NameForm.parse(form or get_setting('NAME_FORM'))
        return weekday_name(_as_bs_date(value).weekday(), form)
    except (ValueError, TypeError) as e:
        logger.debug("bs_day_name failed for %r: %s", value, e)
        return ''


@register.filter
def bs_numeral(value):
    """Writes a number with the digits chosen by BS_DATE_NUMERALS."""
    try:
        return to_localized_numeral(value, numeral_table())
    except (TypeError, ValueError):
        return value


@register.simple_tag
def bs_today(style=None):
    """Today's BS date. Usage: {% bs_today "nepali" %}"""
    return format_bs_date(BSDate.from_ad(local_today()), style or get_setting('FORMAT'))
