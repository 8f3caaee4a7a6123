"""Value inspection CLI command."""

from __future__ import annotations

from decimal import Decimal, localcontext

from ..bounds import (
    MAX_NUMERIC_VALUE,
    NUMERIC_BOUNDS,
    NUMERIC_PRECISION,
    fractional_digits,
    validate,
)
from ..codec.byteorder import reverse
from ..codec.encoder import as_decimal
from ..codec.scaling import to_mantissa
from ..codec.twos_complement import encode_int


def format_bytes(data: bytes, style: str = "hex") -> str:
    """Render bytes as a hex string or a comma-separated list of ints."""
    if style == "list":
        return ",".join(str(b) for b in data)
    return data.hex()


def parse_bytes(text: str, style: str = "hex") -> bytes:
    """Parse the output of format_bytes back to bytes.

    Raises:
        ValueError: If text is not valid for the given style
    """
    text = text.strip()
    if style == "list":
        if not text:
            return b""
        return bytes(int(part) for part in text.split(","))
    return bytes.fromhex(text)


def inspect_value(text: str, style: str = "hex") -> None:
    """Print a step-by-step breakdown of how a value is encoded.

    Args:
        text: Decimal literal to inspect
        style: Byte rendering style ("hex" or "list")
    """
    value = as_decimal(text)
    validate(value)

    mantissa = to_mantissa(value)
    big_endian = encode_int(mantissa)
    wire = reverse(big_endian)
    # Exact only because validate() has capped value at 38 digits and scale 9
    with localcontext() as ctx:
        ctx.prec = NUMERIC_PRECISION
        headroom = MAX_NUMERIC_VALUE - value.copy_abs()

    print(f"{'=' * 19} NUMERIC {value} {'=' * 19}")
    print(f"fractional digits{'.' * 21}{fractional_digits(value)} (max {NUMERIC_BOUNDS.scale})")
    print(f"mantissa (x10^{NUMERIC_BOUNDS.scale}){'.' * 21}{mantissa}")
    print(f"two's complement (BE){'.' * 17}{format_bytes(big_endian, style)}")
    print(f"wire bytes (LE){'.' * 23}{format_bytes(wire, style)}")
    print(f"encoded size{'.' * 26}{len(wire)} bytes")
    print(f"headroom to bound{'.' * 21}{_plain(headroom)}")


def _plain(value: Decimal) -> str:
    """Render a decimal without exponent notation."""
    return format(value, "f")
