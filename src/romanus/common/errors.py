"""Errors raised by the Roman numeral conversions.

Every failure is a RomanNumeralError tagged with one of the four ErrorKind
members, so callers can branch on ``error.kind`` instead of parsing messages.
"""
from enum import Enum
from typing import Optional, Union


class ErrorKind(Enum):
    """The closed set of conversion failures."""
    VALUE_TOO_SMALL = "value_too_small"
    VALUE_TOO_LARGE = "value_too_large"
    EMPTY_STRING = "empty_string"
    UNPARSABLE = "unparsable"


class RomanNumeralError(ValueError):
    """Raised when a value or a numeral cannot be converted.
    
    Attributes:
        kind: Which of the ErrorKind failures occurred
        value: The offending integer (VALUE_TOO_SMALL, VALUE_TOO_LARGE),
               the normalized numeral (UNPARSABLE), or None (EMPTY_STRING)
    
    Example:
        >>> str(RomanNumeralError(ErrorKind.VALUE_TOO_LARGE, 4000))
        '4000 is too large'
    """

    def __init__(self, kind: ErrorKind, value: Optional[Union[int, str]] = None):
        self.kind = kind
        self.value = value
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        if self.kind is ErrorKind.VALUE_TOO_SMALL:
            return f"{self.value} is too small"
        if self.kind is ErrorKind.VALUE_TOO_LARGE:
            return f"{self.value} is too large"
        if self.kind is ErrorKind.UNPARSABLE:
            return f"{self.value} is not a valid Roman numeral"
        return "No Roman numeral provided"

    def __eq__(self, other):
        if not isinstance(other, RomanNumeralError):
            return NotImplemented
        return (self.kind, self.value) == (other.kind, other.value)

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"RomanNumeralError({self.kind}, {self.value!r})"
