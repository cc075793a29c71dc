"""
Core domain models for datekit.

Plain enums and frozen dataclasses shared by the service layer.
Instants themselves are pandas Timestamps; pd.NaT marks an invalid instant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pandas as pd


# ── Enums ─────────────────────────────────────────────────────────────────────

class DateUnit(str, Enum):
    DAYS   = "days"
    MONTHS = "months"
    YEARS  = "years"


DATE_UNIT_TYPES: dict[str, str] = {unit.name: unit.value for unit in DateUnit}


# ── Holidays ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FixedHoliday:
    """A holiday that falls on the same month/day every year."""
    month: int
    day: int
    name: str

    def instant(self, year) -> pd.Timestamp:
        """
        Midnight of this holiday in `year`.

        A fractional year is truncated. Returns pd.NaT when `year` is NaN,
        not numeric, or outside the range pandas can represent.
        """
        try:
            return pd.Timestamp(year=int(year), month=self.month, day=self.day)
        except (TypeError, ValueError, OverflowError):
            return pd.NaT


FIXED_HOLIDAYS: tuple[FixedHoliday, ...] = (
    FixedHoliday(month=1,  day=1,  name="New Year's Day"),
    FixedHoliday(month=12, day=25, name="Christmas Day"),
    FixedHoliday(month=12, day=31, name="New Year's Eve"),
)
