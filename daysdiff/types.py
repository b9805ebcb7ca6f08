from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from .rules import MONTH_NAMES, USAGE

DateField = Literal["year", "month", "day"]


@dataclass(frozen=True)
class ParsedDate:
    """A validated calendar date. Only `parse` hands these out."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "ParsedDate":
        return cls(year=d.year, month=d.month, day=d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


class ParseError(ValueError):
    """Base for every rejected date string."""


class WrongFormat(ParseError):
    """Not M/D or M/D/Y, or not exactly one command-line argument."""

    def __init__(self, text: str, count: int, message: str | None = None) -> None:
        self.text = text
        self.count = count
        super().__init__(message or f"The given input might be incorrectly formatted.\n{USAGE}")

    @classmethod
    def argument_count(cls, args: list[str]) -> "WrongFormat":
        return cls(
            " ".join(args),
            len(args),
            f"Wrong number of inputs; expected 1, but given {len(args)}.\n{USAGE}",
        )


class NotANumber(ParseError):
    def __init__(self, field: DateField, text: str) -> None:
        self.field = field
        self.text = text
        super().__init__(f'Parse{field.capitalize()}Error: Expected a number; given "{text}".')


class MonthOutOfRange(ParseError):
    def __init__(self, month: int | None) -> None:
        self.month = month
        super().__init__("The given month does not exist.")


class DayOutOfRange(ParseError):
    def __init__(self, month: int, year: int | None = None) -> None:
        self.month = month
        self.year = year
        where = MONTH_NAMES[month - 1]
        # February is the only month whose length depends on the year.
        if month == 2 and year is not None:
            where = f"{where} {year}"
        super().__init__(f"The given day does not exist in the month of {where}.")


class YearOutOfRange(ParseError):
    def __init__(self, year: int | None) -> None:
        self.year = year
        super().__init__("The given year is out of range; expected 1 to 9999.")
