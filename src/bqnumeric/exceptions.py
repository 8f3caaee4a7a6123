"""Exception hierarchy for bqnumeric.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NumericError for easy catching of any bqnumeric-specific error.
"""

from __future__ import annotations


class NumericError(Exception):
    """Base exception for all bqnumeric errors."""

    pass


class EncodeError(NumericError):
    """Raised when a value cannot be encoded.

    Examples:
        - Unsupported input type (float, None, arbitrary objects)
        - Too many fractional digits (see ScaleExceededError)
    """

    pass


class DecodeError(NumericError):
    """Raised when the input to decode is not a byte sequence."""

    pass


class ScaleExceededError(EncodeError):
    """Raised when a decimal has more fractional digits than NUMERIC allows.

    Attributes:
        actual: Fractional digit count of the rejected value
        maximum: Largest fractional digit count accepted
    """

    def __init__(self, actual: int, maximum: int) -> None:
        self.actual = actual
        self.maximum = maximum
        super().__init__(f"Scale exceeds maximum: {actual} (allowed: {maximum})")


class NumericOverflowError(NumericError):
    """Raised when a value lies outside the NUMERIC range.

    Raised on encode for out-of-range input, and on decode when the byte
    string holds a mantissa larger than any valid NUMERIC value.

    Attributes:
        value: String form of the offending value
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Numeric overflow: {value}")
