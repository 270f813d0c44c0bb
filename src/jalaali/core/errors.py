class JalaaliError(Exception):
    """Base error."""

class InvalidJalaaliYearError(JalaaliError, ValueError):
    """Raised when a Jalaali year falls outside the break-point table."""

    def __init__(self, year: int):
        super().__init__(f"Invalid Jalaali year {year}")
        self.year = year

class InvalidJalaaliDateError(JalaaliError, ValueError):
    """Raised when a Jalaali month or day is out of range."""

class AmbiguousCalendarError(JalaaliError, ValueError):
    """Raised when Jalaali and Gregorian fields are set in one call."""

class FormatMismatchError(JalaaliError, ValueError):
    """Raised when a string does not match the given format."""
