"""Conversion between decimals and fixed-scale integer mantissas.

A NUMERIC value is stored as ``value * 10^9``. Both directions work on the
decimal's digit tuple so that no decimal context (and its 28-digit default
precision) can round a 38-digit value.
"""

from __future__ import annotations

from decimal import Decimal

from ..bounds import NUMERIC_SCALE, fractional_digits
from ..exceptions import ScaleExceededError


def to_mantissa(value: Decimal) -> int:
    """Rescale value to exactly 9 fractional digits and return the numerator.

    Args:
        value: Finite decimal with 0 to 9 fractional digits

    Returns:
        Integer equal to value * 10^9

    Raises:
        ScaleExceededError: If value has more than 9 fractional digits or a
            positive exponent

    Example:
        >>> to_mantissa(Decimal("1.2"))
        1200000000
    """
    scale = fractional_digits(value)
    if not 0 <= scale <= NUMERIC_SCALE:
        raise ScaleExceededError(scale, NUMERIC_SCALE)

    sign, digits, exponent = value.as_tuple()
    coefficient = 0
    for digit in digits:
        coefficient = coefficient * 10 + digit

    # -NUMERIC_SCALE <= exponent <= 0 here, so the shift is at most 10^9
    mantissa = coefficient * 10 ** (int(exponent) + NUMERIC_SCALE)
    return -mantissa if sign else mantissa


def from_mantissa(mantissa: int) -> Decimal:
    """Interpret an integer as a value with 9 implied fractional digits.

    The result keeps exponent -9 (``Decimal("1.200000000")`` rather than
    ``Decimal("1.2")``); it compares equal to the original input.

    Example:
        >>> from_mantissa(1200000000)
        Decimal('1.200000000')
    """
    digits = tuple(int(ch) for ch in str(abs(mantissa)))
    return Decimal((1 if mantissa < 0 else 0, digits, -NUMERIC_SCALE))
