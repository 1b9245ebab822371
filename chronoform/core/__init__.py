"""Core temporal types.

This module provides the value types formatters read and produce:
    - CalendarDate: Calendar date in the proleptic Gregorian calendar
    - TimeOfDay: Time of day with nanosecond precision
    - DateTime: One CalendarDate and one TimeOfDay owned together
"""

from __future__ import annotations

from chronoform.core.date import CalendarDate
from chronoform.core.datetime import DateTime
from chronoform.core.time import TimeOfDay

__all__: list[str] = [
    "CalendarDate",
    "DateTime",
    "TimeOfDay",
]
