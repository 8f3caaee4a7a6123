"""Byte-order conversion between the codec's big-endian form and the wire.

NUMERIC byte strings on the wire store the two's complement integer with the
least significant byte first.
"""

from __future__ import annotations


def reverse(data: bytes) -> bytes:
    """Return data with its byte order reversed.

    The operation is its own inverse: ``reverse(reverse(b)) == b``.

    Example:
        >>> reverse(b"\\x47\\x86\\x8c\\x00")
        b'\\x00\\x8c\\x86G'
    """
    return bytes(data[::-1])
