"""Pytest configuration and fixtures for Chronoform tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so chronoform can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronoform import CalendarDate, DateTime, FixedClock  # noqa: E402


@pytest.fixture
def november_14() -> CalendarDate:
    """Thursday, November 14, 1974."""
    return CalendarDate(1974, 11, 14)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2024-01-15 09:30:15.250."""
    return FixedClock(DateTime(2024, 1, 15, 9, 30, 15, millisecond=250))
