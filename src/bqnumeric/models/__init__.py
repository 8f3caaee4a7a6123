"""Pydantic models and field helpers for NUMERIC values."""

from __future__ import annotations

from .base import NumericValue
from .fields import NumericDecimal, NumericField

__all__ = [
    "NumericValue",
    "NumericDecimal",
    "NumericField",
]
