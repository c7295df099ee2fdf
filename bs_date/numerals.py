"""
Arabic <-> Devanagari numeral transliteration
"""
from types import MappingProxyType

NEPALI_DIGITS = MappingProxyType({
    '0': '०',
    '1': '१',
    '2': '२',
    '3': '३',
    '4': '४',
    '5': '५',
    '6': '६',
    '7': '७',
    '8': '८',
    '9': '९',
})

ARABIC_DIGITS = MappingProxyType({digit: digit for digit in '0123456789'})


def to_localized_numeral(number: int, digits=NEPALI_DIGITS) -> str:
    """
    Write an integer with the given digit table

    Example:
        >>> to_localized_numeral(2082)
        '२०८२'
    """
    text = str(int(number))
    return ''.join(digits.get(char, char) for char in text)


def from_localized_numeral(text: str, digits=NEPALI_DIGITS) -> int:
    """
    Read an integer written with the given digit table (ASCII digits also accepted)

    Raises:
        ValueError: If text is not a whole number
    """
    reverse = {local: arabic for arabic, local in digits.items()}
    cleaned = ''.join(reverse.get(char, char) for char in str(text).strip())
    if not cleaned.lstrip('-').isascii() or not cleaned.lstrip('-').isdigit():
        raise ValueError(f"Invalid number: {text!r}")
    return int(cleaned)
