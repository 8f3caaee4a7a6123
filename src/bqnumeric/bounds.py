"""NUMERIC bounds and value validation.

BigQuery NUMERIC values carry at most 38 significant digits, 9 of them after
the decimal point. This module holds those fixed parameters and the checks
every value passes through before it is encoded (and after it is decoded).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from .exceptions import NumericOverflowError, ScaleExceededError

logger = logging.getLogger(__name__)

NUMERIC_SCALE = 9
NUMERIC_PRECISION = 38


@dataclass(frozen=True)
class NumericBounds:
    """Fixed-scale decimal limits.

    Attributes:
        scale: Number of fractional digits (default 9)
        precision: Total number of significant digits (default 38)
        max_value: Largest representable value, derived from scale/precision
        min_value: Smallest representable value (``-max_value``)

    Example:
        >>> NumericBounds().max_value
        Decimal('99999999999999999999999999999.999999999')
    """

    scale: int = NUMERIC_SCALE
    precision: int = NUMERIC_PRECISION
    max_value: Decimal = field(init=False)
    min_value: Decimal = field(init=False)

    def __post_init__(self) -> None:
        """Validate parameters and derive the limits."""
        if self.scale < 0:
            raise ValueError(f"scale must be >= 0, got {self.scale}")

        if self.precision <= self.scale:
            raise ValueError(
                f"precision must exceed scale, got precision={self.precision} scale={self.scale}"
            )

        # 10^precision - 1 units of 10^-scale: all nines
        largest = Decimal((0, (9,) * self.precision, -self.scale))
        object.__setattr__(self, "max_value", largest)
        object.__setattr__(self, "min_value", largest.copy_negate())

    @property
    def integer_digits(self) -> int:
        """Number of digits allowed before the decimal point."""
        return self.precision - self.scale

    def contains(self, value: Decimal) -> bool:
        """Return True if value lies within [min_value, max_value]."""
        if not value.is_finite():
            return False
        return self.min_value <= value <= self.max_value


NUMERIC_BOUNDS = NumericBounds()

MAX_NUMERIC_VALUE = NUMERIC_BOUNDS.max_value
MIN_NUMERIC_VALUE = NUMERIC_BOUNDS.min_value


def fractional_digits(value: Decimal) -> int:
    """Return the number of digits after the decimal point, as written.

    Trailing zeros count: ``Decimal("1.50")`` has 2 fractional digits.
    Values written with a positive exponent are negative: ``Decimal("1E+3")``
    has -3.

    Args:
        value: Finite decimal value

    Returns:
        Fractional digit count (negative for positive exponents)
    """
    exponent = value.as_tuple().exponent
    if not isinstance(exponent, int):
        # NaN / Infinity carry a string exponent
        return 0
    return -exponent


def validate_scale(value: Decimal) -> None:
    """Check that value has between 0 and NUMERIC_SCALE fractional digits.

    A positive exponent (``1E+3``) is a negative scale and is rejected, so an
    accepted value never carries an exponent above zero.

    Raises:
        ScaleExceededError: If the value has too many fractional digits or a
            negative scale
    """
    scale = fractional_digits(value)
    if not 0 <= scale <= NUMERIC_BOUNDS.scale:
        logger.debug("Rejecting %s: scale %d outside 0..%d", value, scale, NUMERIC_BOUNDS.scale)
        raise ScaleExceededError(scale, NUMERIC_BOUNDS.scale)


def validate_range(value: Decimal) -> None:
    """Check that value lies within [MIN_NUMERIC_VALUE, MAX_NUMERIC_VALUE].

    Raises:
        NumericOverflowError: If the value is out of range or not finite
    """
    if not NUMERIC_BOUNDS.contains(value):
        logger.debug("Rejecting %s: outside NUMERIC range", value)
        raise NumericOverflowError(str(value))


def validate(value: Decimal) -> None:
    """Run the scale check followed by the range check.

    Raises:
        ScaleExceededError: If the value has more than 9 fractional digits or
            a positive exponent
        NumericOverflowError: If the value is outside the NUMERIC range
    """
    validate_scale(value)
    validate_range(value)


def is_valid(value: Decimal) -> bool:
    """Return True if value can be encoded as a NUMERIC."""
    try:
        validate(value)
    except (ScaleExceededError, NumericOverflowError):
        return False
    return True
