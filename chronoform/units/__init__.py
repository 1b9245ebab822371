"""Temporal units and enumerations.

This module provides:
    - Field: the semantic kinds of date/time fields a pattern can reference
"""

from __future__ import annotations

from chronoform.units.field import DATE_FIELDS, TIME_FIELDS, Field

__all__: list[str] = [
    "DATE_FIELDS",
    "Field",
    "TIME_FIELDS",
]
