"""bqnumeric: BigQuery NUMERIC byte-string codec

A Python library for converting decimals to and from the byte strings used
for NUMERIC columns by the BigQuery Storage Write API. Values are stored as
``value * 10^9`` in minimal two's complement, least significant byte first.

Key Features:
- Exact: no floating point, no decimal-context rounding
- Range and scale checks (38 digits of precision, 9 after the point)
- Pydantic field type for NUMERIC values
- Pure Python implementation

Quick Start:
    >>> from decimal import Decimal
    >>> from bqnumeric import encode, decode
    >>>
    >>> data = encode(Decimal("1.2"))
    >>> list(data)
    [0, 140, 134, 71]
    >>> decode(data)
    Decimal('1.200000000')
"""

from __future__ import annotations

__version__ = "0.1.0"

from .bounds import (
    MAX_NUMERIC_VALUE,
    MIN_NUMERIC_VALUE,
    NUMERIC_BOUNDS,
    NUMERIC_PRECISION,
    NUMERIC_SCALE,
    NumericBounds,
    is_valid,
    validate,
)
from .codec import decode, decode_int, encode, encode_int
from .exceptions import (
    DecodeError,
    EncodeError,
    NumericError,
    NumericOverflowError,
    ScaleExceededError,
)
from .models import NumericDecimal, NumericField, NumericValue
from .utils import encoded_size, max_encoded_size

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_int",
    "decode_int",
    # Bounds and validation
    "NUMERIC_SCALE",
    "NUMERIC_PRECISION",
    "MAX_NUMERIC_VALUE",
    "MIN_NUMERIC_VALUE",
    "NUMERIC_BOUNDS",
    "NumericBounds",
    "validate",
    "is_valid",
    # Models
    "NumericValue",
    "NumericDecimal",
    "NumericField",
    # Exceptions
    "NumericError",
    "EncodeError",
    "DecodeError",
    "ScaleExceededError",
    "NumericOverflowError",
    # Sizing
    "encoded_size",
    "max_encoded_size",
    # Version
    "__version__",
]
