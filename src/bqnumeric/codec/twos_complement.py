"""Minimal big-endian two's complement encoding for arbitrary-size integers.

This module converts between Python integers and the shortest byte string
whose two's complement value equals the integer (the same layout Java's
``BigInteger.toByteArray()`` produces). Negation is done with an explicit
complement-and-carry pass over the bytes, so values wider than 128 bits are
handled the same way as small ones.
"""

from __future__ import annotations

SIGN_BIT = 0x80


def _magnitude_bytes(value: int) -> bytearray:
    """Return the big-endian bytes of abs(value); zero yields a single 0x00."""
    magnitude = abs(value)
    length = max(1, (magnitude.bit_length() + 7) // 8)
    return bytearray(magnitude.to_bytes(length, "big"))


def _negate_in_place(buffer: bytearray) -> bool:
    """Complement every byte and add one, propagating carry from the LSB.

    Args:
        buffer: Big-endian bytes, modified in place

    Returns:
        True if the carry ran off the most significant byte
    """
    for i in range(len(buffer)):
        buffer[i] ^= 0xFF

    carry = True
    for i in range(len(buffer) - 1, -1, -1):
        if not carry:
            break
        if buffer[i] == 0xFF:
            buffer[i] = 0x00
        else:
            buffer[i] += 1
            carry = False

    return carry


def _strip_sign_extension(data: bytes) -> bytes:
    """Drop leading 0x00/0xFF bytes that only repeat the sign bit."""
    start = 0
    while start < len(data) - 1:
        head = data[start]
        next_negative = bool(data[start + 1] & SIGN_BIT)
        if head == 0xFF and next_negative:
            start += 1
        elif head == 0x00 and not next_negative:
            start += 1
        else:
            break
    return data[start:]


def encode_int(value: int) -> bytes:
    """Encode an integer as minimal big-endian two's complement.

    Args:
        value: Signed integer of any size

    Returns:
        Shortest byte string whose sign bit matches the sign of value

    Examples:
        >>> encode_int(0)
        b'\\x00'
        >>> encode_int(128)
        b'\\x00\\x80'
        >>> encode_int(-128)
        b'\\x80'
    """
    buffer = _magnitude_bytes(value)

    if value < 0:
        if _negate_in_place(buffer):
            buffer.insert(0, 0x01)
        if not buffer[0] & SIGN_BIT:
            buffer.insert(0, 0xFF)
    elif buffer[0] & SIGN_BIT:
        buffer.insert(0, 0x00)

    return bytes(buffer)


def decode_int(data: bytes) -> int:
    """Decode big-endian two's complement bytes to an integer.

    Decoding is total: every byte string maps to some integer, and redundant
    sign-extension bytes are accepted.

    Args:
        data: Big-endian two's complement bytes (may be empty)

    Returns:
        Signed integer value (0 for empty input)
    """
    if not data:
        return 0

    trimmed = _strip_sign_extension(bytes(data))

    if trimmed[0] & SIGN_BIT:
        buffer = bytearray(trimmed)
        _negate_in_place(buffer)
        return -int.from_bytes(buffer, "big")

    return int.from_bytes(trimmed, "big")


def minimal_length(value: int) -> int:
    """Return the number of bytes encode_int(value) produces.

    Example:
        >>> minimal_length(127), minimal_length(128), minimal_length(-128)
        (1, 2, 1)
    """
    if value < 0:
        # ~value is the non-negative integer sharing value's bit pattern
        value = ~value
    return value.bit_length() // 8 + 1
