"""NUMERIC encoder.

This module provides the encode() function that converts a decimal value to
the byte string BigQuery expects for a NUMERIC column.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from ..bounds import validate
from ..exceptions import EncodeError
from .byteorder import reverse
from .scaling import to_mantissa
from .twos_complement import encode_int

logger = logging.getLogger(__name__)

NumericInput = Union[Decimal, int, str]


def as_decimal(value: NumericInput) -> Decimal:
    """Coerce supported inputs to Decimal without losing exactness."""
    # bool is an int subclass but never a meaningful NUMERIC
    if isinstance(value, bool):
        raise EncodeError(f"expected Decimal, int or str, got {type(value).__name__}")

    if isinstance(value, Decimal):
        return value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as err:
            raise EncodeError(f"invalid decimal literal: {value!r}") from err

    raise EncodeError(f"expected Decimal, int or str, got {type(value).__name__}")


def encode(value: NumericInput) -> bytes:
    """Encode a decimal to NUMERIC wire bytes.

    The value is scaled by 10^9, written as minimal big-endian two's
    complement, and returned with its bytes reversed (least significant
    byte first).

    Args:
        value: Decimal (or exact int / decimal string) to encode

    Returns:
        Wire bytes

    Raises:
        EncodeError: If value is not a Decimal, int or decimal string
        ScaleExceededError: If value has more than 9 fractional digits or a
            positive exponent
        NumericOverflowError: If value is outside the NUMERIC range

    Examples:
        ```python
        from decimal import Decimal
        from bqnumeric import encode

        encode(Decimal("1.2"))   # b'\\x00\\x8c\\x86G'
        encode(Decimal("0"))     # b'\\x00'
        ```
    """
    decimal_value = as_decimal(value)
    validate(decimal_value)

    mantissa = to_mantissa(decimal_value)
    encoded = reverse(encode_int(mantissa))

    logger.debug("Encoded %s as mantissa %d (%d bytes)", decimal_value, mantissa, len(encoded))
    return encoded
