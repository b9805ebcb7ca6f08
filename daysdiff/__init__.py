"""Days-until / days-since calculator.

Parsing and reporting are pure functions of the input and an explicit "today";
only the CLI looks at the clock.
"""

from .types import (
    DayOutOfRange,
    MonthOutOfRange,
    NotANumber,
    ParsedDate,
    ParseError,
    WrongFormat,
    YearOutOfRange,
)
from .parsers import parse
from .report import day_offset, report
