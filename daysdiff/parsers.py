from __future__ import annotations

import re
from datetime import date

from .rules import MAX_YEAR, MIN_YEAR, days_in_month, is_leap_year
from .types import (
    DateField,
    DayOutOfRange,
    MonthOutOfRange,
    NotANumber,
    ParsedDate,
    WrongFormat,
    YearOutOfRange,
)

# Plain unsigned decimal; int() alone would also take "+3", " 3", "1_0" and non-ASCII digits.
FIELD_RE = re.compile(r"[0-9]+")

# No valid field needs more significant digits than this; int() refuses very long strings.
MAX_FIELD_DIGITS = 9


def parse_field(text: str, field: DateField) -> int | None:
    """Return the field's value, or None if it is too long to be in range."""
    if not FIELD_RE.fullmatch(text):
        raise NotANumber(field, text)
    significant = text.lstrip("0")
    if len(significant) > MAX_FIELD_DIGITS:
        return None
    return int(significant or "0")


def validate_year(text: str) -> int:
    year = parse_field(text, "year")
    if year is None or not MIN_YEAR <= year <= MAX_YEAR:
        raise YearOutOfRange(year)
    return year


def validate_month(text: str) -> int:
    month = parse_field(text, "month")
    if month is None or not 1 <= month <= 12:
        raise MonthOutOfRange(month)
    return month


def validate_day(month: int, text: str, year: int | None) -> int:
    """Parse a day and check it against the month's length.

    With no year yet, February is allowed 29 days; `resolve_year` re-checks it.
    """
    day = parse_field(text, "day")
    leap = True if year is None else is_leap_year(year)
    if day is None or not 1 <= day <= days_in_month(month, leap):
        raise DayOutOfRange(month, year)
    return day


def resolve_year(month: int, day: int, today: ParsedDate) -> int:
    """Pick the year for a bare month/day: this year, or next year if it already passed."""

    year = today.year
    if (month, day) < (today.month, today.day):
        year += 1
    if year > MAX_YEAR:
        raise YearOutOfRange(year)
    if month == 2 and day == 29 and not is_leap_year(year):
        raise DayOutOfRange(month, year)
    return year


def parse(raw: str, today: ParsedDate | date) -> ParsedDate:
    """Parse `M/D` or `M/D/Y` into a valid date.

    Raises a ParseError subclass on the first problem found; fields are checked
    year first, then month, then day.
    """

    if isinstance(today, date):
        today = ParsedDate.from_date(today)

    parts = raw.split("/")
    if len(parts) == 3:
        m, d, y = parts
        year = validate_year(y)
        month = validate_month(m)
        day = validate_day(month, d, year)
        return ParsedDate(year=year, month=month, day=day)

    if len(parts) == 2:
        m, d = parts
        month = validate_month(m)
        day = validate_day(month, d, None)
        year = resolve_year(month, day, today)
        return ParsedDate(year=year, month=month, day=day)

    raise WrongFormat(raw, len(parts))
