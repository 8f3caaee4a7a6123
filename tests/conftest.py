"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from decimal import Decimal

import pytest


@pytest.fixture
def max_value() -> Decimal:
    """Largest NUMERIC value."""
    return Decimal("99999999999999999999999999999.999999999")


@pytest.fixture
def min_value() -> Decimal:
    """Smallest NUMERIC value."""
    return Decimal("-99999999999999999999999999999.999999999")
