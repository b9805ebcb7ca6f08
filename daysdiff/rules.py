from __future__ import annotations

USAGE = "USAGE: daysdiff mm/dd/yyyy // you can optionally omit year input"

MIN_YEAR = 1
MAX_YEAR = 9999

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_LONG_MONTHS = {1, 3, 5, 7, 8, 10, 12}


def is_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month: int, leap: bool) -> int:
    """Upper day bound for a month (1-12)."""
    if month == 2:
        return 29 if leap else 28
    if month in _LONG_MONTHS:
        return 31
    return 30
