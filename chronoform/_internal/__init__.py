"""Internal utilities for Chronoform.

This module contains private implementation details:
    - Constants and text symbol tables
    - Gregorian calendar arithmetic
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronoform._internal.validation import (
    require_int,
    validate_bounds,
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "require_int",
    "validate_bounds",
    "validate_day",
    "validate_day_of_year",
    "validate_month",
    "validate_year",
]
