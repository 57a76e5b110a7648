"""Calendar helpers: leap years, month lengths and month-based shifting."""

from __future__ import annotations

import datetime as _dt
from typing import TypeVar

__all__ = ["is_leap_year", "days_in_month", "shift_months"]

_Moment = TypeVar("_Moment", _dt.date, _dt.datetime)

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def shift_months(moment: _Moment, months: int) -> _Moment:
    """Move ``moment`` by a number of calendar months.

    The time of day and time zone are kept. When the day does not exist in
    the target month, it is clamped to that month's last day.
    """
    total = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    if not _dt.MINYEAR <= year <= _dt.MAXYEAR:
        raise ValueError(f"shifting by {months} months leaves the supported year range")
    day = min(moment.day, days_in_month(year, month))
    return moment.replace(year=year, month=month, day=day)