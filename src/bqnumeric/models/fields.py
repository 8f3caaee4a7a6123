"""Field type helpers for pydantic models holding NUMERIC values.

This module provides an annotated Decimal type and a Field() wrapper that
apply the NUMERIC scale and range checks during pydantic validation.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, cast

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic.fields import FieldInfo

from ..bounds import (
    MAX_NUMERIC_VALUE,
    MIN_NUMERIC_VALUE,
    NUMERIC_PRECISION,
    NUMERIC_SCALE,
    validate,
)
from ..exceptions import NumericError


def _reject_inexact(value: Any) -> Any:
    """Pydantic before-validator: refuse floats (and bools) ahead of coercion."""
    if isinstance(value, (float, bool)):
        raise ValueError(f"expected Decimal, int or str, got {type(value).__name__}")
    return value


def _check_numeric(value: Decimal) -> Decimal:
    """Pydantic after-validator: re-raise codec errors as ValueError."""
    try:
        validate(value)
    except NumericError as err:
        raise ValueError(str(err)) from err
    return value


NumericDecimal = Annotated[
    Decimal, BeforeValidator(_reject_inexact), AfterValidator(_check_numeric)
]
"""Decimal (from Decimal, int or str input) with 0-9 fractional digits, within the NUMERIC range."""


def NumericField(**kwargs: Any) -> FieldInfo:
    """Create a field carrying NUMERIC metadata.

    Use together with the NumericDecimal annotation, which does the actual
    checking. The metadata shows up in the model's JSON schema.

    Args:
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Payment(BaseModel):
        ...     amount: NumericDecimal = NumericField(description="Amount in USD")
    """
    return cast(
        FieldInfo,
        Field(
            json_schema_extra={
                "bigquery_type": "NUMERIC",
                "precision": NUMERIC_PRECISION,
                "scale": NUMERIC_SCALE,
                "minimum": str(MIN_NUMERIC_VALUE),
                "maximum": str(MAX_NUMERIC_VALUE),
            },
            **kwargs,
        ),
    )
