from __future__ import annotations

from datetime import date

import pytest

from daysdiff.cli import main
from daysdiff.rules import USAGE

TODAY = date(2024, 3, 15)


def test_prints_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    main(["3/20"], today=TODAY)
    out, err = capsys.readouterr()
    assert out == "5 days left until 2024-03-20, Wednesday.\n"
    assert err == ""


def test_rolled_over_date(capsys: pytest.CaptureFixture[str]) -> None:
    main(["1/1"], today=TODAY)
    assert capsys.readouterr().out == "292 days left until 2025-01-01, Wednesday.\n"


@pytest.mark.parametrize("argv", [[], ["1/1", "2/2"]])
def test_wrong_argument_count(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(argv, today=TODAY)
    msg = str(ei.value.code)
    assert msg.startswith(f"Wrong number of inputs; expected 1, but given {len(argv)}.")
    assert msg.endswith(USAGE)
    assert capsys.readouterr().out == ""


def test_invalid_date_exits_with_message(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["13/1/2024"], today=TODAY)
    assert ei.value.code == "The given month does not exist."
    assert capsys.readouterr().out == ""


def test_dash_leading_date_is_not_an_option(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["-1/2"], today=TODAY)
    assert ei.value.code == 'ParseMonthError: Expected a number; given "-1".'
    assert capsys.readouterr().out == ""


def test_dash_leading_token_counts_as_argument() -> None:
    with pytest.raises(SystemExit) as ei:
        main(["1/1", "-x"], today=TODAY)
    assert str(ei.value.code).startswith("Wrong number of inputs; expected 1, but given 2.")
