"""End-to-end integration tests."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, localcontext

import pytest
from pydantic import BaseModel

from bqnumeric import (
    MAX_NUMERIC_VALUE,
    NumericDecimal,
    NumericError,
    NumericField,
    NumericOverflowError,
    decode,
    encode,
    encoded_size,
    is_valid,
)


class LedgerRow(BaseModel):
    """A row destined for a NUMERIC column."""

    account: str
    balance: NumericDecimal = NumericField(description="Account balance")


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_row_workflow(self) -> None:
        """Test model validation, sizing, encoding and decoding."""
        # 1. Validate through pydantic
        row = LedgerRow(account="ACME-001", balance="-123456789.42001")

        # 2. Check encoded size
        size = encoded_size(row.balance)
        assert size == 8

        # 3. Encode for the wire
        wire = encode(row.balance)
        assert len(wire) == size
        assert list(wire) == [240, 149, 130, 65, 180, 100, 73, 254]

        # 4. Decode and rebuild the row
        restored = LedgerRow(account=row.account, balance=decode(wire))
        assert restored == row

    def test_reject_before_encode(self) -> None:
        """Test a caller can screen values with is_valid."""
        candidates = [Decimal("1.5"), Decimal("1.0000000001"), Decimal("1E+30")]
        accepted = [value for value in candidates if is_valid(value)]
        assert accepted == [Decimal("1.5")]

        for value in candidates[1:]:
            with pytest.raises(NumericError):
                encode(value)

    def test_low_context_precision(self) -> None:
        """Test results do not depend on the active decimal context."""
        with localcontext() as ctx:
            ctx.prec = 5
            wire = encode(MAX_NUMERIC_VALUE)
            assert decode(wire) == MAX_NUMERIC_VALUE

    def test_concurrent_calls(self) -> None:
        """Test independent calls from many threads."""
        values = [Decimal(n) / 1000 for n in range(-500, 500)]

        def roundtrip(value: Decimal) -> Decimal:
            return decode(encode(value))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(roundtrip, values))

        assert results == values

    def test_corrupted_bytes(self) -> None:
        """Test bytes from outside the NUMERIC range are reported, not returned."""
        wire = bytearray(encode(MAX_NUMERIC_VALUE))
        wire[-1] = 0x7F  # raise the top byte, keep it positive
        with pytest.raises(NumericOverflowError):
            decode(bytes(wire))
