"""Utility functions for bqnumeric.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, max_encoded_size

__all__ = [
    "encoded_size",
    "max_encoded_size",
]
