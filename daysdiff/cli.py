"""Print how many days are left until (or have passed since) a date.

Usage:
  daysdiff 12/25          # next Dec 25 (this year, or next if it already passed)
  daysdiff 2/29/2028
"""

from __future__ import annotations

import argparse
from datetime import date

from .parsers import parse
from .report import report
from .rules import USAGE
from .types import ParseError, WrongFormat


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="daysdiff",
        description="Count the days between today and a month/day[/year] date.",
        epilog=USAGE,
    )
    ap.add_argument("date", nargs="*", help="Date as M/D or M/D/Y (year is optional).")
    return ap


def main(argv: list[str] | None = None, *, today: date | None = None) -> None:
    # "-1/2" is a bad date, not an option.
    args, extra = build_parser().parse_known_args(argv)
    tokens = args.date + extra

    if today is None:
        today = date.today()

    try:
        if len(tokens) != 1:
            raise WrongFormat.argument_count(tokens)
        target = parse(tokens[0], today)
    except ParseError as e:
        raise SystemExit(str(e))

    print(report(target, today))


if __name__ == "__main__":
    main()
