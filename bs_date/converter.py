"""
Bikram Sambat <-> Anno Domini date conversion through Julian Day Numbers
"""
import logging
import math
from datetime import date, datetime

from . import julian
from .calendar_data import (
    BS_CALENDAR_DATA,
    EPOCH_AD_END,
    EPOCH_AD_START,
    EPOCH_BS,
    EPOCH_JULIAN_DAY,
    MAX_YEAR,
    MIN_YEAR,
    days_in_year,
    month_lengths,
)
from .exceptions import ADDateOutOfRange, BSDateOutOfRange

logger = logging.getLogger(__name__)


def is_valid_bs_date(year: int, month: int, day: int) -> bool:
    """Validate if a BS date is covered by the calendar table"""
    if year not in BS_CALENDAR_DATA:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > BS_CALENDAR_DATA[year][month - 1]:
        return False
    return True


def validate_bs_date(year: int, month: int, day: int) -> None:
    """
    Raises:
        BSDateOutOfRange: If the date is invalid or the year not supported
    """
    if not is_valid_bs_date(year, month, day):
        raise BSDateOutOfRange(
            f"Invalid BS date: {year}/{month}/{day}. "
            f"Supported years: {MIN_YEAR}-{MAX_YEAR}",
            min_year=MIN_YEAR,
            max_year=MAX_YEAR,
        )


def days_since_epoch(year: int, month: int, day: int) -> int:
    """Count total days from the epoch (2000/01/01 BS) to a valid BS date"""
    total_days = 0

    # Add days for complete years
    for y in range(EPOCH_BS[0], year):
        total_days += days_in_year(y)

    # Add days for complete months in target year
    total_days += sum(month_lengths(year)[:month - 1])

    # Add remaining days
    total_days += day - 1

    return total_days


def bs_to_julian_day(bs_date) -> float:
    """
    Convert a BS date to its Julian Day Number

    Args:
        bs_date: BSDate (anything with year, month and day attributes)

    Raises:
        BSDateOutOfRange: If the date is invalid or the year not supported
    """
    validate_bs_date(bs_date.year, bs_date.month, bs_date.day)
    return EPOCH_JULIAN_DAY + days_since_epoch(bs_date.year, bs_date.month, bs_date.day)


def julian_day_to_bs(julian_day: float):
    """
    Convert a Julian Day Number to a BS date

    A remaining day count equal to a whole year or month stays in that
    period and resolves to its last day.

    Raises:
        BSDateOutOfRange: If the Julian day is before the epoch or past the table
    """
    from .dates import BSDate

    offset = julian_day - EPOCH_JULIAN_DAY
    if not math.isfinite(offset) or offset < 0:
        raise BSDateOutOfRange(
            f"Julian day {julian_day} is not on or after the epoch ({EPOCH_JULIAN_DAY}). "
            f"Supported years: {MIN_YEAR}-{MAX_YEAR}",
            min_year=MIN_YEAR,
            max_year=MAX_YEAR,
        )

    # 1-based day count within the current period
    remaining = offset + 1

    # Find the year
    year = EPOCH_BS[0]
    while remaining > days_in_year(year):
        remaining -= days_in_year(year)
        year += 1

    # Find the month
    lengths = month_lengths(year)
    month = 1
    while remaining > lengths[month - 1]:
        remaining -= lengths[month - 1]
        month += 1

    day = math.ceil(remaining)

    return BSDate(year, month, day)


def _as_ad_date(value) -> date:
    if isinstance(value, str):
        try:
            return datetime.strptime(value, '%Y-%m-%d').date()
        except ValueError:
            raise ValueError(f"Invalid AD date: {value!r}. Expected YYYY-MM-DD") from None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date, datetime or str, got {type(value).__name__}")


def check_ad_range(value) -> date:
    """
    Ensure an AD date can be converted

    Returns:
        The calendar date of value

    Raises:
        ADDateOutOfRange: If the date is outside 1943-04-14 to 2034-04-13
    """
    ad_date = _as_ad_date(value)
    if not EPOCH_AD_START <= ad_date <= EPOCH_AD_END:
        raise ADDateOutOfRange(
            f"Date {ad_date.isoformat()} is out of range "
            f"({EPOCH_AD_START.isoformat()} to {EPOCH_AD_END.isoformat()})",
            start=EPOCH_AD_START,
            end=EPOCH_AD_END,
        )
    return ad_date


def ad_to_bs(ad_date):
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        ad_date: date, datetime (its calendar date is used) or 'YYYY-MM-DD' string

    Returns:
        BSDate

    Raises:
        ADDateOutOfRange: If the date is outside the supported range
    """
    ad_date = check_ad_range(ad_date)
    result = julian_day_to_bs(julian.to_julian_day(ad_date))
    logger.debug("Converted AD %s to BS %s", ad_date, result)
    return result


def bs_to_ad(bs_date) -> date:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Raises:
        BSDateOutOfRange: If date is invalid or year not supported
    """
    result = julian.from_julian_day(bs_to_julian_day(bs_date))
    logger.debug("Converted BS %s to AD %s", bs_date, result)
    return result
