# carbono

A small, fluent wrapper around timezone-aware UTC datetimes. A `Carbono` is
immutable: every alteration returns a new `Carbono`, so calls can be chained
freely. The package uses only the standard library.

## Installation

```
pip install carbono
```

## Getting started

```python
from carbono.core import Carbono

moment = Carbono.create_date(2022, 12, 15).add_hours(12).add_minutes(30)

print(moment)                 # 2022-12-15 12:30:00 UTC
moment.timestamp()            # 1671107400
moment.rfc3339()              # "2022-12-15T12:30:00+00:00"
moment.rfc2822()              # "Thu, 15 Dec 2022 12:30:00 +0000"

moment.year(), moment.month(), moment.day()        # (2022, 12, 15)
moment.hour(), moment.minute(), moment.second()    # (12, 30, 0)

moment.datetime()             # "2022-12-15 12:30:00"
moment.date()                 # "2022-12-15"
moment.time()                 # "12:30:00"
str(moment.iso_week())        # "2022-W50"
moment.weekday()              # 3  (Monday is 0)
moment.is_thursday()          # True

moment.add_year().add_month().date()       # "2024-01-15"
moment.start_year().datetime()             # "2022-01-01 00:00:00"
moment.end_month().datetime()              # "2022-12-31 23:59:59"
```

## Creating a Carbono

- `Carbono(moment)` wraps a `datetime.datetime`. A naive datetime is taken to
  be in UTC; an aware one is converted to UTC. Anything other than a datetime
  raises `TypeError`.
- `Carbono.now()` wraps the current UTC time.
- `Carbono.create_date(year, month, day)` gives midnight UTC of that date; an
  invalid date raises `ValueError`.
- `get()` returns the underlying aware UTC `datetime.datetime`.

Two `Carbono` objects are equal when they hold the same moment, and they can be
used as dictionary keys.

## Reading values

- `timestamp()`: whole seconds since the Unix epoch.
- `rfc3339()`, `rfc2822()`: formatted strings with a `+00:00` / `+0000` offset.
  `rfc3339()` and `time()` show a sub-second part with 3 or 6 digits when there
  is one.
- `year()`, `month()`, `day()`, `hour()`, `minute()`, `second()`.
- `datetime()`, `date()`, `time()`: `"YYYY-MM-DD HH:MM:SS"`, `"YYYY-MM-DD"`,
  `"HH:MM:SS"`.
- `weekday()`: Monday is 0, Sunday is 6.
- `iso_week()`: an `IsoWeek` with `year` and `week` fields, shown as `2022-W50`.

## Altering the date and time

- `add_year()`, `sub_year()`, `add_years(n)`, `sub_years(n)`
- `add_month()`, `sub_month()`, `add_months(n)`, `sub_months(n)`
- `add_week()`, `sub_week()`, `add_weeks(n)`, `sub_weeks(n)`
- `add_day()`, `sub_day()`, `add_days(n)`, `sub_days(n)`
- `add_hour()`, `sub_hour()`, `add_hours(n)`, `sub_hours(n)`
- `add_minute()`, `sub_minute()`, `add_minutes(n)`, `sub_minutes(n)`
- `add_second()`, `sub_second()`, `add_seconds(n)`, `sub_seconds(n)`

Month and year shifts keep the day of month and the time of day, clamping the
day to the last day of the target month when needed (31 January plus one month
is 28 or 29 February). A shift that leaves the years `datetime` supports raises
`ValueError`. Weeks, days, hours, minutes and seconds are fixed-length steps.

## Start and end of a period

- `start_year()`, `start_month()`, `start_day()`, `start_hour()`, `start_minute()`
- `end_year()`, `end_month()`, `end_day()`, `end_hour()`, `end_minute()`

Start methods set the smaller fields to their lowest values (`00:00:00`, first
day, January); end methods set them to `23:59:59`, the last day of the month or
31 December. The sub-second part is left as it is.

## Queries

- `is_past()`, `is_future()`, `is_today()`: compared with the current UTC time
  at the moment of the call. A moment equal to now counts as future.
- `is_monday()` through `is_sunday()`
- `is_leap_year()`

## Calendar helpers

`carbono.calendar_math` exposes the underlying functions:

- `is_leap_year(year)`: proleptic Gregorian leap-year rule.
- `days_in_month(year, month)`: raises `ValueError` for a month outside 1..12.
- `shift_months(moment, months)`: moves a `date` or `datetime` by calendar
  months with the clamping described above.

## What it does not do

`Carbono` always works in UTC: it does not keep or display other time zones,
parse date strings, or offer a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```