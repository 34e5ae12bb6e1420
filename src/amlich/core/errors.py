class AmlichError(Exception):
    """Base error."""

class InvalidLunarDateError(AmlichError, ValueError):
    """Raised when a lunar date does not exist, e.g. a leap month the year does not have."""

class _UnknownNameError(AmlichError, KeyError):
    # KeyError.__str__ would quote the message
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownCalendarError(_UnknownNameError):
    """Raised when a calendar preset name is not registered."""

class UnknownAttributeError(_UnknownNameError):
    """Raised when an attribute name is not registered."""
