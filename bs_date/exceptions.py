"""
Exceptions raised by Bikram Sambat date conversion
"""


class BSDateError(ValueError):
    """Base class for all bs_date errors"""


class ConstructionError(BSDateError):
    """A BSDate was built without a year, month or day"""


class BSDateOutOfRange(BSDateError):
    """BS year, month or day is not covered by the calendar table"""

    def __init__(self, message, min_year=None, max_year=None):
        super().__init__(message)
        self.min_year = min_year
        self.max_year = max_year


class ADDateOutOfRange(BSDateError):
    """AD date falls outside the convertible range"""

    def __init__(self, message, start=None, end=None):
        super().__init__(message)
        self.start = start
        self.end = end


class InvalidOptionCombination(BSDateError):
    """Mutually exclusive presentation options were requested together"""
