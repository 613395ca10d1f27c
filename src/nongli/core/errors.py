class NongliError(Exception):
    """Base error."""

class InvalidDate(NongliError, ValueError):
    """Raised when a civil or lunar date field is out of range."""

class InvalidLunarMonth(NongliError, ValueError):
    """Raised for a lunar month number outside 1..12 (or -1..-12 for leap)."""

class InvalidLeapMonth(InvalidLunarMonth):
    """Raised when a leap month is requested for a month the year does not repeat."""

class InvalidTimeField(NongliError, ValueError):
    """Raised when hour, minute or second is out of range."""

class InvalidName(NongliError, ValueError):
    """Raised for an unknown cyclic label name."""

class KernelUnavailableError(NongliError):
    """Raised when an optional ephemeris kernel (e.g. DE422) is not available."""

class KernelRangeError(NongliError):
    """Raised when a date lies outside the range a kernel can compute."""
