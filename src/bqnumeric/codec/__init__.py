"""NUMERIC byte-string codec.

This module provides encoding and decoding between decimals and the
byte-reversed two's complement form used for BigQuery NUMERIC values.
"""

from __future__ import annotations

from .byteorder import reverse
from .decoder import decode
from .encoder import encode
from .scaling import from_mantissa, to_mantissa
from .twos_complement import decode_int, encode_int, minimal_length

__all__ = [
    "encode",
    "decode",
    "encode_int",
    "decode_int",
    "minimal_length",
    "to_mantissa",
    "from_mantissa",
    "reverse",
]
