"""Encoded size calculation utilities.

This module provides functions to calculate the wire size of NUMERIC values
without actually encoding them.
"""

from __future__ import annotations

from ..bounds import MAX_NUMERIC_VALUE, validate
from ..codec.encoder import NumericInput, as_decimal
from ..codec.scaling import to_mantissa
from ..codec.twos_complement import minimal_length


def encoded_size(value: NumericInput) -> int:
    """Calculate the encoded size of a value in bytes.

    Args:
        value: Decimal (or exact int / decimal string)

    Returns:
        Number of wire bytes encode(value) produces

    Raises:
        EncodeError: If value is not a supported type
        ScaleExceededError: If value has more than 9 fractional digits or a
            positive exponent
        NumericOverflowError: If value is outside the NUMERIC range

    Example:
        >>> encoded_size(Decimal("1.2"))
        4  # 1200000000 = 0x47868C00
        >>> encoded_size(Decimal("128"))
        5
    """
    decimal_value = as_decimal(value)
    validate(decimal_value)
    return minimal_length(to_mantissa(decimal_value))


def max_encoded_size() -> int:
    """Return the largest wire size any NUMERIC value can have.

    Example:
        >>> max_encoded_size()
        16
    """
    return encoded_size(MAX_NUMERIC_VALUE)
