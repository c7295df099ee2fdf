"""
Nepal fiscal year helpers

Nepal fiscal year: Shrawan 1 to Ashadh end (approximately mid-July to mid-July)
"""
import logging
import re
from datetime import date
from typing import Tuple

from .calendar_data import days_in_month
from .converter import ad_to_bs, bs_to_ad
from .dates import BSDate

logger = logging.getLogger(__name__)

SHRAWAN = 4
ASHADH = 3

_FISCAL_YEAR_PATTERN = re.compile(r'^(\d{4})/(\d{2})$')


def get_fiscal_year(value, format='string'):
    """
    Get fiscal year for a given date

    Args:
        value: BSDate, or an AD date/datetime/'YYYY-MM-DD' string
        format: 'string' returns "2080/81", 'dict' returns {'start_year': 2080, 'end_year': 2081}

    Returns:
        Fiscal year string or dict
    """
    bs_date = value if isinstance(value, BSDate) else ad_to_bs(value)

    # Fiscal year starts from Shrawan (month 4)
    if bs_date.month >= SHRAWAN:
        start_year = bs_date.year
    else:
        start_year = bs_date.year - 1
    end_year = start_year + 1

    if format == 'dict':
        return {'start_year': start_year, 'end_year': end_year}
    return f"{start_year}/{str(end_year)[-2:]}"


def parse_fiscal_year(fiscal_year_string: str) -> int:
    """
    Get the starting BS year of a fiscal year string like "2080/81"

    Raises:
        ValueError: If the string is malformed or the years are not consecutive
    """
    match = _FISCAL_YEAR_PATTERN.match(fiscal_year_string.strip())
    if not match:
        raise ValueError(f"Invalid FY format: {fiscal_year_string!r}. Expected '2080/81'.")
    start_year = int(match.group(1))
    if str(start_year + 1)[-2:] != match.group(2):
        raise ValueError(f"Invalid FY {fiscal_year_string!r}: years must be consecutive")
    return start_year


def get_fiscal_year_bs_dates(fiscal_year_string: str) -> Tuple[BSDate, BSDate]:
    """Get the first and last BS dates of a fiscal year"""
    start_year = parse_fiscal_year(fiscal_year_string)
    end_year = start_year + 1

    # Fiscal year ends on last day of Ashadh
    ashadh_days = days_in_month(end_year, ASHADH)
    return BSDate(start_year, SHRAWAN, 1), BSDate(end_year, ASHADH, ashadh_days)


def get_fiscal_year_dates(fiscal_year_string: str) -> Tuple[date, date]:
    """
    Get start and end AD dates for a fiscal year

    Args:
        fiscal_year_string: String like "2080/81"

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If the string is malformed
        BSDateOutOfRange: If the fiscal year is not covered by the calendar table
    """
    start, end = get_fiscal_year_bs_dates(fiscal_year_string)
    start_date, end_date = bs_to_ad(start), bs_to_ad(end)
    logger.debug("FY %s spans %s to %s", fiscal_year_string, start_date, end_date)
    return start_date, end_date


def get_current_fiscal_year() -> str:
    """Get current fiscal year based on today's date"""
    from .conf import local_today
    return get_fiscal_year(local_today())
