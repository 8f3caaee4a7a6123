"""NUMERIC decoder.

This module provides the decode() function that converts NUMERIC wire bytes
back to a decimal value.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Union

from ..bounds import validate_range
from ..exceptions import DecodeError
from .byteorder import reverse
from .scaling import from_mantissa
from .twos_complement import decode_int

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def decode(data: BytesLike) -> Decimal:
    """Decode NUMERIC wire bytes to a decimal.

    Any byte string decodes to some integer; the result is then checked
    against the NUMERIC range, since malformed input can hold a mantissa
    wider than 38 digits. The scale is not re-checked: it is always 9.

    Args:
        data: Wire bytes (least significant byte first); empty means zero

    Returns:
        Decimal with exactly 9 fractional digits

    Raises:
        DecodeError: If data is not bytes-like
        NumericOverflowError: If the decoded value is outside the NUMERIC range

    Examples:
        ```python
        from bqnumeric import decode

        decode(bytes([0, 140, 134, 71]))   # Decimal('1.200000000')
        decode(b"")                        # Decimal('0E-9')
        ```
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"expected bytes-like input, got {type(data).__name__}")

    mantissa = decode_int(reverse(bytes(data)))
    value = from_mantissa(mantissa)
    validate_range(value)

    logger.debug("Decoded %d bytes to %s", len(data), value)
    return value
