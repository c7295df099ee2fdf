"""
BS Date - Bikram Sambat <-> Anno Domini date conversion for Nepal
"""

__version__ = '1.0.0'

# Import commonly used functions for easy access
from .calendar_data import (
    BS_CALENDAR_DATA,
    EPOCH_AD_END,
    EPOCH_AD_START,
    month_lengths,
    supported_year_range,
)
from .converter import (
    ad_to_bs,
    bs_to_ad,
    bs_to_julian_day,
    is_valid_bs_date,
    julian_day_to_bs,
)
from .dates import BSDate
from .exceptions import (
    ADDateOutOfRange,
    BSDateError,
    BSDateOutOfRange,
    ConstructionError,
    InvalidOptionCombination,
)
from .fiscal import get_fiscal_year, get_fiscal_year_dates
from .formatting import MONTHS, WEEKDAYS, NameForm, format_bs_date
from .numerals import to_localized_numeral

__all__ = [
    'BSDate',
    'ad_to_bs',
    'bs_to_ad',
    'bs_to_julian_day',
    'julian_day_to_bs',
    'is_valid_bs_date',
    'month_lengths',
    'supported_year_range',
    'get_fiscal_year',
    'get_fiscal_year_dates',
    'format_bs_date',
    'to_localized_numeral',
    'NameForm',
    'BS_CALENDAR_DATA',
    'EPOCH_AD_START',
    'EPOCH_AD_END',
    'MONTHS',
    'WEEKDAYS',
    'BSDateError',
    'ConstructionError',
    'BSDateOutOfRange',
    'ADDateOutOfRange',
    'InvalidOptionCombination',
]
