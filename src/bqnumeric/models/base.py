"""Pydantic model for a single NUMERIC value and its wire form."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..codec.decoder import BytesLike, decode
from ..codec.encoder import encode
from .fields import NumericDecimal, NumericField


class NumericValue(BaseModel):
    """A validated NUMERIC value.

    Construction runs the scale and range checks, so any instance can be
    encoded without error.

    Example:
        >>> value = NumericValue(value="1.2")
        >>> value.wire_hex
        '008c8647'
        >>> NumericValue.from_wire(value.to_wire()).value
        Decimal('1.200000000')
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    value: NumericDecimal = NumericField(description="Decimal value")

    def to_wire(self) -> bytes:
        """Encode the value to NUMERIC wire bytes."""
        return encode(self.value)

    @property
    def wire_hex(self) -> str:
        """Wire bytes as a lowercase hex string."""
        return self.to_wire().hex()

    @classmethod
    def from_wire(cls, data: BytesLike) -> NumericValue:
        """Decode wire bytes into a NumericValue.

        Raises:
            DecodeError: If data is not bytes-like
            NumericOverflowError: If the decoded value is outside the NUMERIC range
        """
        return cls(value=decode(data))
