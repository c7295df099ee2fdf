"""
Month and weekday names, and BS date formatting
"""
from enum import Enum

from .calendar_data import MAX_YEAR, MIN_YEAR
from .exceptions import BSDateOutOfRange, InvalidOptionCombination
from .numerals import to_localized_numeral


# (Devanagari, romanized), Baisakh first
MONTHS = (
    ('बैशाख', 'Baisakh'),
    ('जेठ', 'Jeth'),
    ('असार', 'Asar'),
    ('श्रावण', 'Shrawan'),
    ('भाद्र', 'Bhadra'),
    ('आश्विन', 'Ashwin'),
    ('कार्तिक', 'Kartik'),
    ('मंसिर', 'Mangsir'),
    ('पुष', 'Poush'),
    ('माघ', 'Magh'),
    ('फाल्गुण', 'Falgun'),
    ('चैत', 'Chaitra'),
)

# (Devanagari, romanized), Sunday first
WEEKDAYS = (
    ('आइतबार', 'Aaitabar'),
    ('सोमबार', 'Sombar'),
    ('मंगलवार', 'Mangalbar'),
    ('बुधबार', 'Budhbar'),
    ('बिहीबार', 'Bihibar'),
    ('शुक्रबार', 'Shukrabar'),
    ('शनिवार', 'Shanibar'),
)

WEEKDAYS_LOCAL = (
    'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday'
)

DATE_FORMATS = ('full', 'short', 'numeric', 'iso', 'nepali')


class NameForm(Enum):
    NEPALI = 'nepali'
    ROMANIZED = 'romanized'
    LOCALIZED = 'localized'

    @classmethod
    def from_flags(cls, romanized=False, localized=False) -> 'NameForm':
        """
        Map boolean romanized/localized options to a NameForm

        Raises:
            InvalidOptionCombination: If both flags are set
        """
        if romanized and localized:
            raise InvalidOptionCombination(
                "You must provide exactly one of romanized or localized"
            )
        if localized:
            return cls.LOCALIZED
        if romanized:
            return cls.ROMANIZED
        return cls.NEPALI

    @classmethod
    def parse(cls, value) -> 'NameForm':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ', '.join(form.value for form in cls)
            raise ValueError(f"Invalid name form: {value!r}. Expected one of: {choices}") from None


def month_name(month: int, form=NameForm.NEPALI) -> str:
    """
    Get BS month name from month number (1-12)

    BS months have no English names, so LOCALIZED gives the romanized name.
    """
    if not 1 <= month <= 12:
        raise BSDateOutOfRange(f"Invalid month: {month}", min_year=MIN_YEAR, max_year=MAX_YEAR)
    nepali, romanized = MONTHS[month - 1]
    return nepali if NameForm.parse(form) is NameForm.NEPALI else romanized


def weekday_name(weekday: int, form=NameForm.NEPALI) -> str:
    """Get weekday name from day of week (0 = Sunday .. 6 = Saturday)"""
    if not 0 <= weekday <= 6:
        raise ValueError(f"Invalid weekday: {weekday}")
    form = NameForm.parse(form)
    if form is NameForm.LOCALIZED:
        return WEEKDAYS_LOCAL[weekday]
    nepali, romanized = WEEKDAYS[weekday]
    return romanized if form is NameForm.ROMANIZED else nepali


def format_bs_date(bs_date, format='full') -> str:
    """
    Format BS date in different styles

    Args:
        bs_date: BSDate
        format: 'full' (Bhadra 25, 2082), 'short' (Bha 25, 2082),
            'numeric' (2082/05/25), 'iso' (2082-05-25) or 'nepali' (भाद्र २५, २०८२)

    Returns:
        Formatted date string
    """
    year, month, day = bs_date.year, bs_date.month, bs_date.day

    if format == 'full':
        return f"{month_name(month, NameForm.ROMANIZED)} {day}, {year}"
    elif format == 'short':
        return f"{month_name(month, NameForm.ROMANIZED)[:3]} {day}, {year}"
    elif format == 'numeric':
        return f"{year}/{month:02d}/{day:02d}"
    elif format == 'iso':
        return f"{year:04d}-{month:02d}-{day:02d}"
    elif format == 'nepali':
        return (
            f"{month_name(month, NameForm.NEPALI)} "
            f"{to_localized_numeral(day)}, {to_localized_numeral(year)}"
        )
    raise ValueError(f"Invalid format: {format!r}. Expected one of: {', '.join(DATE_FORMATS)}")
