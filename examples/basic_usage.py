#!/usr/bin/env python3
"""Basic usage example for bqnumeric.

This example demonstrates:
1. Encoding a decimal to NUMERIC wire bytes
2. Decoding wire bytes back to a decimal
3. Validating values with a pydantic model
4. Handling scale and overflow errors
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ValidationError

from bqnumeric import (
    MAX_NUMERIC_VALUE,
    NumericDecimal,
    NumericError,
    NumericField,
    decode,
    encode,
    encoded_size,
)


class Invoice(BaseModel):
    """Invoice row with a NUMERIC total."""

    invoice_id: str
    total: NumericDecimal = NumericField(description="Invoice total")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bqnumeric Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a value
    print("1. Encoding values...")
    for text in ("1.2", "-1.2", "128", str(MAX_NUMERIC_VALUE)):
        value = Decimal(text)
        wire = encode(value)
        print(f"   {text:>42} -> {wire.hex()} ({encoded_size(value)} bytes)")
    print()

    # Decode wire bytes
    print("2. Decoding wire bytes...")
    wire = bytes([0, 140, 134, 71])
    print(f"   {list(wire)} -> {decode(wire)}")
    print()

    # Validate through pydantic
    print("3. Validating with a pydantic model...")
    invoice = Invoice(invoice_id="INV-7", total="1999.99")
    print(f"   {invoice.invoice_id}: {invoice.total} -> {encode(invoice.total).hex()}")
    try:
        Invoice(invoice_id="INV-8", total="0.0000000001")
    except ValidationError as e:
        print(f"   rejected: {e.errors()[0]['msg']}")
    print()

    # Errors
    print("4. Handling errors...")
    for text in ("1.0000000001", "100000000000000000000000000000"):
        try:
            encode(Decimal(text))
        except NumericError as e:
            print(f"   {text}: {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
