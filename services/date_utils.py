"""
Date utilities: calendar offsets, range/ordering checks and holiday lookup.

All calendar arithmetic is delegated to pandas:
    Instants       : pd.Timestamp; pd.NaT is the invalid-instant sentinel
    Offsets        : pd.DateOffset (calendar-aware month/year addition)
    Loose inputs   : pd.to_datetime(errors="coerce"), then local wall time

Error policy:
    add() and is_within_range() validate and raise.
    Every other entry point degrades to a defined value (False / NaT) instead.

The holiday source is simulated: get_holidays() sleeps for
settings.holiday_fetch_delay_s before returning a freshly built list.
"""

from __future__ import annotations

import asyncio
import logging
import math
import numbers
from datetime import date as _date
from datetime import datetime

import numpy as np
import pandas as pd

from config.settings import settings
from models.domain import DATE_UNIT_TYPES, FIXED_HOLIDAYS, DateUnit

logger = logging.getLogger("datekit.services.date_utils")

_DATE_LIKE = (datetime, _date, np.datetime64)


# ── Exceptions ─────────────────────────────────────────────────────────────────

class DateUtilsError(ValueError):
    """Base class for validation failures raised by this module."""


class InvalidInputError(DateUtilsError):
    pass


class InvalidRangeError(DateUtilsError):
    pass


# ── Helpers ────────────────────────────────────────────────────────────────────

def _coerce(value) -> pd.Timestamp:
    """
    Best-effort conversion to a naive local-wall-time Timestamp.

    Anything unusable becomes NaT. Tz-aware values are shifted into the
    system's local zone and stripped of their tzinfo, so naive and aware
    inputs always compare.
    """
    try:
        result = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return pd.NaT
    # None passes through to_datetime untouched; containers come back as indexes
    if not isinstance(result, pd.Timestamp):
        return pd.NaT
    return _to_local_wall(result)


def _to_local_wall(ts: pd.Timestamp) -> pd.Timestamp:
    if ts.tzinfo is None:
        return ts
    # Local offset at that instant (DST-aware); keeps nanoseconds intact
    offset = ts.to_pydatetime(warn=False).astimezone().utcoffset()
    return ts.tz_convert(None) + offset


def _validate_date(value) -> pd.Timestamp:
    if not isinstance(value, _DATE_LIKE):
        raise InvalidInputError(f"Invalid date provided: {value!r}")
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise InvalidInputError("Invalid date provided: NaT")
    return ts


def _validate_amount(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"Invalid amount provided: {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"Invalid amount provided: {value!r}")
    # Fractional amounts truncate toward zero
    return int(value)


def _resolve_unit(unit) -> DateUnit | None:
    if unit not in DATE_UNIT_TYPES.values():
        return None
    return DateUnit(unit)


# ── Public API ─────────────────────────────────────────────────────────────────

def get_current_year() -> int:
    return datetime.now().year


def add(date, amount, unit: DateUnit | str = DateUnit.DAYS) -> pd.Timestamp:
    """
    Return `date` shifted by `amount` units (days, months or years).

    Month and year shifts follow pandas DateOffset semantics, so the day is
    clamped to the end of a shorter target month (Jan 31 + 1 month = Feb 29
    in a leap year). An unrecognized `unit` returns an unchanged copy of
    `date` rather than raising.

    Raises InvalidInputError if `date` is not a valid date or `amount` is not
    a finite real number.
    """
    base = _validate_date(date)
    n = _validate_amount(amount)

    resolved = _resolve_unit(unit)
    if resolved is None:
        logger.debug("add: unrecognized unit %r, returning date unchanged", unit)
        return pd.Timestamp(base)

    try:
        return base + pd.DateOffset(**{resolved.value: n})
    except (OverflowError, pd.errors.OutOfBoundsDatetime) as exc:
        raise InvalidInputError(
            f"Offset of {n} {resolved.value} from {base} is out of range"
        ) from exc


def is_within_range(date, from_, to) -> bool:
    """
    True if `date` lies strictly between `from_` and `to` (both excluded).

    Raises InvalidRangeError when `from_` is after `to`.
    """
    start, end = _coerce(from_), _coerce(to)
    if start > end:
        raise InvalidRangeError("Invalid range: from date must be before to date")
    ts = _coerce(date)
    return bool(ts > start and ts < end)


def is_date_before(date, compare_date) -> bool:
    return bool(_coerce(date) < _coerce(compare_date))


def is_same_day(date, compare_date) -> bool:
    """True if both fall on the same local calendar day. NaT never matches."""
    a, b = _coerce(date), _coerce(compare_date)
    if pd.isna(a) or pd.isna(b):
        return False
    return a.date() == b.date()


# ── Holiday lookup ─────────────────────────────────────────────────────────────

async def get_holidays(year) -> list[pd.Timestamp]:
    """
    Fetch the holidays for `year` from the (simulated) holiday source.

    Returns New Year's Day, Christmas Day and New Year's Eve, in that order.
    A year that cannot form a date (NaN, non-numeric) yields NaT entries
    instead of raising. Nothing is cached; each call builds a new list.
    """
    await asyncio.sleep(settings.holiday_fetch_delay_s)
    holidays = [h.instant(year) for h in FIXED_HOLIDAYS]
    logger.debug("get_holidays: year=%r -> %s", year, holidays)
    return holidays


async def is_holiday(date) -> bool:
    """True if `date` is a holiday of its own local year. NaT resolves False."""
    # _coerce yields local wall time, so .year is the local calendar year
    ts = _coerce(date)
    holidays = await get_holidays(ts.year)
    return any(is_same_day(ts, h) for h in holidays)
