"""
Gregorian date <-> Julian Day Number bridge

Julian days count from noon, so midnight of any calendar date has a .5 fraction.
"""
from datetime import date, datetime, timedelta, timezone

# Julian Day of 1970-01-01T00:00:00 UTC
UNIX_EPOCH_JULIAN_DAY = 2440587.5

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECONDS_PER_DAY = 86400.0


def to_julian_day(value) -> float:
    """
    Convert an AD date or datetime to a Julian Day Number

    Args:
        value: date (read as midnight), naive datetime (read as UTC)
            or aware datetime (converted to UTC)

    Returns:
        Julian Day Number as float, keeping any time-of-day fraction
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - _UNIX_EPOCH
        return UNIX_EPOCH_JULIAN_DAY + delta.total_seconds() / _SECONDS_PER_DAY
    if isinstance(value, date):
        days = value.toordinal() - _UNIX_EPOCH.date().toordinal()
        return UNIX_EPOCH_JULIAN_DAY + days
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def from_julian_day_datetime(julian_day: float) -> datetime:
    """Convert a Julian Day Number to an aware UTC datetime"""
    return _UNIX_EPOCH + timedelta(days=julian_day - UNIX_EPOCH_JULIAN_DAY)


def from_julian_day(julian_day: float) -> date:
    """Convert a Julian Day Number to the AD calendar date it falls on (UTC)"""
    return from_julian_day_datetime(julian_day).date()
