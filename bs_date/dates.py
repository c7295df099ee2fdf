"""
BSDate value type
"""
import re
from datetime import date, timedelta
from functools import total_ordering

from .exceptions import ConstructionError


_DATE_PATTERN = re.compile(r'^\s*(\S+?)\s*[-/.]\s*(\S+?)\s*[-/.]\s*(\S+?)\s*$')


@total_ordering
class BSDate:
    """
    A Bikram Sambat calendar date

    Construction only checks that year, month and day are given. Range
    validation happens on conversion, so a BSDate may hold an invalid date
    until to_ad() or to_julian_day() is called.

    Example:
        >>> BSDate(2082, 5, 25).to_ad()
        datetime.date(2025, 9, 10)
    """

    __slots__ = ('_year', '_month', '_day')

    def __init__(self, year=None, month=None, day=None):
        if not year or not month or not day:
            raise ConstructionError("Year, month, and day are required")
        self._year = year
        self._month = month
        self._day = day

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @classmethod
    def from_ad(cls, ad_date) -> 'BSDate':
        """Create a BSDate from an AD date, datetime or 'YYYY-MM-DD' string"""
        from .converter import ad_to_bs
        return ad_to_bs(ad_date)

    @classmethod
    def from_julian_day(cls, julian_day: float) -> 'BSDate':
        from .converter import julian_day_to_bs
        return julian_day_to_bs(julian_day)

    @classmethod
    def today(cls) -> 'BSDate':
        return cls.from_ad(date.today())

    @classmethod
    def from_string(cls, value: str) -> 'BSDate':
        """
        Parse 'YYYY-MM-DD', 'YYYY/MM/DD' or 'YYYY.MM.DD'

        Digits may be ASCII or Devanagari. The result is not range checked.

        Raises:
            ValueError: If the string is not a date
        """
        from .numerals import from_localized_numeral

        match = _DATE_PATTERN.match(value or '')
        if not match:
            raise ValueError(f"Invalid BS date string: {value!r}")
        year, month, day = (from_localized_numeral(part) for part in match.groups())
        return cls(year, month, day)

    def as_tuple(self):
        return (self._year, self._month, self._day)

    def is_valid(self) -> bool:
        from .converter import is_valid_bs_date
        return is_valid_bs_date(self._year, self._month, self._day)

    def to_julian_day(self) -> float:
        from .converter import bs_to_julian_day
        return bs_to_julian_day(self)

    def to_ad(self) -> date:
        """
        Convert to the equivalent AD date

        Raises:
            BSDateOutOfRange: If the date is invalid or out of range
        """
        from .converter import bs_to_ad
        return bs_to_ad(self)

    def days_in_month(self) -> int:
        from .calendar_data import days_in_month
        return days_in_month(self._year, self._month)

    def weekday(self) -> int:
        """Day of week, 0 = Sunday .. 6 = Saturday"""
        return self.to_ad().isoweekday() % 7

    def month_name(self, romanized=False) -> str:
        """Month name in Devanagari, or romanized ('Bhadra')"""
        from .formatting import NameForm, month_name
        return month_name(self._month, NameForm.from_flags(romanized=romanized))

    def day_name(self, romanized=False, localized=False) -> str:
        """
        Day name in Devanagari ('बुधबार'), romanized ('Budhbar') or English ('Wednesday')

        Raises:
            InvalidOptionCombination: If both romanized and localized are set
        """
        from .formatting import NameForm, weekday_name
        form = NameForm.from_flags(romanized=romanized, localized=localized)
        return weekday_name(self.weekday(), form)

    def to_nepali(self) -> str:
        """Format in Nepali script, e.g. 'भाद्र २५, २०८२'"""
        return self.format('nepali')

    def format(self, style='full') -> str:
        from .formatting import format_bs_date
        return format_bs_date(self, style)

    def isoformat(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def __add__(self, other):
        if isinstance(other, timedelta):
            return BSDate.from_ad(self.to_ad() + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return BSDate.from_ad(self.to_ad() - other)
        if isinstance(other, BSDate):
            return self.to_ad() - other.to_ad()
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, BSDate):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other):
        if not isinstance(other, BSDate):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"BSDate({self._year}, {self._month}, {self._day})"
