from __future__ import annotations

from datetime import date

from .rules import WEEKDAY_NAMES
from .types import ParsedDate

LEFT_UNTIL = "days left until"
PASSED_SINCE = "days has passed since"


def _as_date(d: ParsedDate | date) -> date:
    return d.to_date() if isinstance(d, ParsedDate) else d


def day_offset(target: ParsedDate | date, today: ParsedDate | date) -> int:
    """Whole calendar days from today to target (negative if target is in the past)."""
    return _as_date(target).toordinal() - _as_date(today).toordinal()


def weekday_name(d: ParsedDate | date) -> str:
    # Locale-independent, unlike strftime("%A").
    return WEEKDAY_NAMES[_as_date(d).weekday()]


def report(target: ParsedDate | date, today: ParsedDate | date) -> str:
    """Format the one-line answer, e.g. "5 days left until 2024-03-20, Wednesday."

    Today itself counts as "0 days left until".
    """

    d = _as_date(target)
    offset = day_offset(d, today)
    if offset >= 0:
        magnitude, phrase = offset, LEFT_UNTIL
    else:
        magnitude, phrase = -offset, PASSED_SINCE
    return f"{magnitude} {phrase} {d.isoformat()}, {weekday_name(d)}."
