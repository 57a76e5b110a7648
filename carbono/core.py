"""The Carbono type: a UTC moment with convenient calendar arithmetic."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

from carbono.calendar_math import days_in_month, is_leap_year, shift_months

__all__ = ["IsoWeek", "Carbono"]

_UTC = _dt.timezone.utc
_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_UTC)
_ONE_SECOND = _dt.timedelta(seconds=1)

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_MONDAY, _TUESDAY, _WEDNESDAY, _THURSDAY, _FRIDAY, _SATURDAY, _SUNDAY = range(7)


@dataclass(frozen=True)
class IsoWeek:
    """An ISO 8601 week: the ISO year and the week number within it."""

    year: int
    week: int

    def __str__(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}"


def _fraction(microsecond: int) -> str:
    """Render a sub-second part with 0, 3 or 6 digits as needed."""
    if microsecond == 0:
        return ""
    if microsecond % 1000 == 0:
        return f".{microsecond // 1000:03d}"
    return f".{microsecond:06d}"


class Carbono:
    """An immutable UTC moment; every alteration returns a new instance.

    A naive datetime given to the constructor is taken to be in UTC; an
    aware one is converted to UTC.
    """

    __slots__ = ("_moment",)

    def __init__(self, moment: _dt.datetime) -> None:
        if not isinstance(moment, _dt.datetime):
            raise TypeError(f"expected a datetime, got {type(moment).__name__}")
        if moment.tzinfo is None or moment.utcoffset() is None:
            moment = moment.replace(tzinfo=_UTC)
        else:
            moment = moment.astimezone(_UTC)
        self._moment = moment

    def __str__(self) -> str:
        return f"{self.datetime()} UTC"

    def __repr__(self) -> str:
        return f"Carbono({self._moment!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Carbono):
            return NotImplemented
        return self._moment == other._moment

    def __hash__(self) -> int:
        return hash(self._moment)

    def _with(self, moment: _dt.datetime) -> Carbono:
        return Carbono(moment)

    def get(self) -> _dt.datetime:
        """Return the underlying aware UTC datetime."""
        return self._moment

    @classmethod
    def now(cls) -> Carbono:
        """Return the current moment in UTC."""
        return cls(_dt.datetime.now(_UTC))

    @classmethod
    def create_date(cls, year: int, month: int, day: int) -> Carbono:
        """Return midnight UTC of the given date; invalid dates raise ValueError."""
        return cls(_dt.datetime(year, month, day, tzinfo=_UTC))

    # Formatting and components

    def timestamp(self) -> int:
        """Whole seconds since the Unix epoch (floored)."""
        return (self._moment - _EPOCH) // _ONE_SECOND

    def rfc3339(self) -> str:
        m = self._moment
        return (
            f"{m.year:04d}-{m.month:02d}-{m.day:02d}T"
            f"{m.hour:02d}:{m.minute:02d}:{m.second:02d}"
            f"{_fraction(m.microsecond)}+00:00"
        )

    def rfc2822(self) -> str:
        m = self._moment
        return (
            f"{_DAY_NAMES[m.weekday()]}, {m.day:02d} {_MONTH_NAMES[m.month - 1]} "
            f"{m.year:04d} {m.hour:02d}:{m.minute:02d}:{m.second:02d} +0000"
        )

    def year(self) -> int:
        return self._moment.year

    def month(self) -> int:
        return self._moment.month

    def day(self) -> int:
        return self._moment.day

    def hour(self) -> int:
        return self._moment.hour

    def minute(self) -> int:
        return self._moment.minute

    def second(self) -> int:
        return self._moment.second

    def datetime(self) -> str:
        return f"{self.date()} {self.time()}"

    def date(self) -> str:
        return self._moment.date().isoformat()

    def time(self) -> str:
        m = self._moment
        return f"{m.hour:02d}:{m.minute:02d}:{m.second:02d}{_fraction(m.microsecond)}"

    def weekday(self) -> int:
        """Day of the week counted from Monday as 0."""
        return self._moment.weekday()

    def iso_week(self) -> IsoWeek:
        iso_year, week, _ = self._moment.isocalendar()
        return IsoWeek(iso_year, week)

    # Predicates

    def is_past(self) -> bool:
        return self._moment < _dt.datetime.now(_UTC)

    def is_future(self) -> bool:
        return self._moment >= _dt.datetime.now(_UTC)

    def is_today(self) -> bool:
        return self._moment.date() == _dt.datetime.now(_UTC).date()

    def is_monday(self) -> bool:
        return self.weekday() == _MONDAY

    def is_tuesday(self) -> bool:
        return self.weekday() == _TUESDAY

    def is_wednesday(self) -> bool:
        return self.weekday() == _WEDNESDAY

    def is_thursday(self) -> bool:
        return self.weekday() == _THURSDAY

    def is_friday(self) -> bool:
        return self.weekday() == _FRIDAY

    def is_saturday(self) -> bool:
        return self.weekday() == _SATURDAY

    def is_sunday(self) -> bool:
        return self.weekday() == _SUNDAY

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year())

    # Years and months (calendar-relative, day clamped to month length)

    def add_year(self) -> Carbono:
        return self.add_years(1)

    def sub_year(self) -> Carbono:
        return self.add_years(-1)

    def add_years(self, years: int) -> Carbono:
        return self._with(shift_months(self._moment, years * 12))

    def sub_years(self, years: int) -> Carbono:
        return self.add_years(-years)

    def add_month(self) -> Carbono:
        return self.add_months(1)

    def sub_month(self) -> Carbono:
        return self.add_months(-1)

    def add_months(self, months: int) -> Carbono:
        return self._with(shift_months(self._moment, months))

    def sub_months(self, months: int) -> Carbono:
        return self.add_months(-months)

    # Fixed-length durations

    def _shift(self, delta: _dt.timedelta) -> Carbono:
        return self._with(self._moment + delta)

    def add_week(self) -> Carbono:
        return self.add_weeks(1)

    def sub_week(self) -> Carbono:
        return self.sub_weeks(1)

    def add_weeks(self, weeks: int) -> Carbono:
        return self._shift(_dt.timedelta(days=weeks * 7))

    def sub_weeks(self, weeks: int) -> Carbono:
        return self._shift(-_dt.timedelta(days=weeks * 7))

    def add_day(self) -> Carbono:
        return self.add_days(1)

    def sub_day(self) -> Carbono:
        return self.sub_days(1)

    def add_days(self, days: int) -> Carbono:
        return self._shift(_dt.timedelta(days=days))

    def sub_days(self, days: int) -> Carbono:
        return self._shift(-_dt.timedelta(days=days))

    def add_hour(self) -> Carbono:
        return self.add_hours(1)

    def sub_hour(self) -> Carbono:
        return self.sub_hours(1)

    def add_hours(self, hours: int) -> Carbono:
        return self._shift(_dt.timedelta(hours=hours))

    def sub_hours(self, hours: int) -> Carbono:
        return self._shift(-_dt.timedelta(hours=hours))

    def add_minute(self) -> Carbono:
        return self.add_minutes(1)

    def sub_minute(self) -> Carbono:
        return self.sub_minutes(1)

    def add_minutes(self, minutes: int) -> Carbono:
        return self._shift(_dt.timedelta(minutes=minutes))

    def sub_minutes(self, minutes: int) -> Carbono:
        return self._shift(-_dt.timedelta(minutes=minutes))

    def add_second(self) -> Carbono:
        return self.add_seconds(1)

    def sub_second(self) -> Carbono:
        return self.sub_seconds(1)

    def add_seconds(self, seconds: int) -> Carbono:
        return self._shift(_dt.timedelta(seconds=seconds))

    def sub_seconds(self, seconds: int) -> Carbono:
        return self._shift(-_dt.timedelta(seconds=seconds))

    # Start and end of periods (sub-second part is kept)

    def start_year(self) -> Carbono:
        return self._with(self._moment.replace(month=1, day=1, hour=0, minute=0, second=0))

    def start_month(self) -> Carbono:
        return self._with(self._moment.replace(day=1, hour=0, minute=0, second=0))

    def start_day(self) -> Carbono:
        return self._with(self._moment.replace(hour=0, minute=0, second=0))

    def start_hour(self) -> Carbono:
        return self._with(self._moment.replace(minute=0, second=0))

    def start_minute(self) -> Carbono:
        return self._with(self._moment.replace(second=0))

    def end_year(self) -> Carbono:
        return self._with(self._moment.replace(month=12, day=31, hour=23, minute=59, second=59))

    def end_month(self) -> Carbono:
        last = days_in_month(self.year(), self.month())
        return self._with(self._moment.replace(day=last, hour=23, minute=59, second=59))

    def end_day(self) -> Carbono:
        return self._with(self._moment.replace(hour=23, minute=59, second=59))

    def end_hour(self) -> Carbono:
        return self._with(self._moment.replace(minute=59, second=59))

    def end_minute(self) -> Carbono:
        return self._with(self._moment.replace(second=59))