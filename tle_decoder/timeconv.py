"""Epoch conversions: (year, day-of-year) to calendar instant to Julian day."""

from __future__ import annotations

import datetime as dt
import math
from typing import NamedTuple

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CalendarInstant(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_to_calendar(year: int, days: float) -> CalendarInstant:
    """Resolve a 1-based fractional day-of-year into month, day and time of day.

    The fraction is split into hours and minutes; the remainder stays a float
    number of seconds so sub-millisecond resolution survives.
    """

    day_of_year = int(math.floor(days))
    year_length = 366 if is_leap_year(year) else 365
    if day_of_year < 1 or day_of_year > year_length:
        raise ValueError(f"day of year {days!r} outside 1..{year_length} for {year}")

    month = 1
    remaining = day_of_year
    for length in _MONTH_DAYS:
        if length == 28 and is_leap_year(year):
            length = 29
        if remaining <= length:
            break
        remaining -= length
        month += 1

    hours = (days - day_of_year) * 24.0
    hour = int(math.floor(hours))
    minutes = (hours - hour) * 60.0
    minute = int(math.floor(minutes))
    second = (minutes - minute) * 60.0
    return CalendarInstant(year, month, remaining, hour, minute, second)


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Julian day of a proleptic Gregorian date and time (Meeus, ch. 7)."""

    if month <= 2:
        year -= 1
        month += 12
    century = math.floor(year / 100)
    correction = 2 - century + math.floor(century / 4)
    jd = (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + correction
        - 1524.5
    )
    return jd + (hour + minute / 60.0 + second / 3600.0) / 24.0


def epoch_to_julian(year: int, days: float) -> float:
    return julian_day(*days_to_calendar(year, days))


def calendar_to_datetime(instant: CalendarInstant) -> dt.datetime:
    """Return ``instant`` as an aware UTC datetime rounded to the microsecond."""

    base = dt.datetime(
        instant.year, instant.month, instant.day, instant.hour, instant.minute,
        tzinfo=dt.timezone.utc,
    )
    return base + dt.timedelta(microseconds=round(instant.second * 1_000_000))


__all__ = [
    "CalendarInstant",
    "is_leap_year",
    "days_to_calendar",
    "julian_day",
    "epoch_to_julian",
    "calendar_to_datetime",
]
