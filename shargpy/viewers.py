"""Aggregate viewer numbers of a TV series from a tab separated data file.

Each data line holds at least five tab separated columns: the season, the
episode number, the air date, the year and the number of viewers.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .charconv import float_from_chars, int_from_chars
from .config import Config
from .errors import ParserError
from .parse import FormatParse
from .values import UINT8, UINT32, IntType

APP_NAME = "Game-of-Parsing"
METHODS = ("mean", "median")

_SEASON_COLUMN = 0
_YEAR_COLUMN = 3
_VIEWERS_COLUMN = 4


def _cast_error(text: str) -> ValueError:
    print(f"Could not cast '{text}' to a valid number", file=sys.stderr)
    return ValueError("CAST ERROR")


def _to_int(text: str, kind: IntType) -> int:
    """Read an integer at the start of ``text``; trailing characters are ignored."""
    if not kind.signed and text.startswith("-"):
        raise _cast_error(text)
    try:
        value = int_from_chars(text).value
    except ValueError:
        raise _cast_error(text) from None
    if not kind.contains(value):
        raise _cast_error(text)
    return value


def _to_float(text: str) -> float:
    """Read a float at the start of ``text``; trailing characters are ignored."""
    try:
        return float(float_from_chars(text).value)
    except (ValueError, OverflowError):
        raise _cast_error(text) from None


def _rows(lines: Iterable[str], header: bool) -> Iterator[list[str]]:
    iterator = iter(lines)
    if header:
        next(iterator, None)
    for line in iterator:
        columns = line.rstrip("\n").split("\t")
        if len(columns) <= _VIEWERS_COLUMN:
            raise ValueError(f"Line has fewer than {_VIEWERS_COLUMN + 1} columns: {line!r}")
        yield columns


def aggregate(values: Sequence[float], method: str) -> float:
    """Return the mean or the median of ``values``.

    The median is the upper middle element of the sorted values.  The mean
    of no values is NaN; the median of no values raises ``ValueError``, as
    does an unknown method.
    """
    if method == "median":
        if not values:
            raise ValueError("The median of no values is undefined")
        ordered = sorted(values)
        return ordered[len(ordered) // 2]
    if method == "mean":
        if not values:
            return math.nan
        return sum(values) / len(values)
    raise ValueError(f"I do not know the aggregation method {method}")


def select_by_year(lines: Iterable[str], year: int, header: bool = False) -> list[float]:
    """Return the viewer numbers of all lines whose year is at least ``year``."""
    return [
        _to_float(columns[_VIEWERS_COLUMN])
        for columns in _rows(lines, header)
        if _to_int(columns[_YEAR_COLUMN], UINT32) >= year
    ]


def select_by_seasons(lines: Iterable[str], seasons: Iterable[int], header: bool = False) -> list[float]:
    """Return the viewer numbers of all lines belonging to one of ``seasons``."""
    wanted = set(seasons)
    return [
        _to_float(columns[_VIEWERS_COLUMN])
        for columns in _rows(lines, header)
        if _to_int(columns[_SEASON_COLUMN], UINT8) in wanted
    ]


def _set_up(parser: FormatParse, args: dict) -> None:
    parser.add_positional_option(
        args, "file_path", Config(description="Please provide a tab separated data file.")
    )
    parser.add_option(
        args,
        "year",
        Config(
            short_id="y",
            long_id="year",
            description="Only data entries that are newer than `year` are considered.",
        ),
        kind=UINT32,
    )
    parser.add_option(
        args,
        "seasons",
        Config(short_id="s", long_id="season", description="Choose the seasons to aggregate."),
        kind=UINT8,
    )
    parser.add_option(
        args,
        "aggregate_by",
        Config(
            short_id="a",
            long_id="aggregate-by",
            description="Choose your method of aggregation: mean or median.",
        ),
    )
    parser.add_flag(
        args,
        "header_is_set",
        Config(
            short_id="H",
            long_id="header-is-set",
            description="Let us know whether your data file contains a header to ensure correct parsing.",
        ),
    )


def _run(args: dict) -> None:
    path: Path = args["file_path"]
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        print("Error: Cannot open file for reading.", file=sys.stderr)
        return

    with handle:
        if args["seasons"]:
            values = select_by_seasons(handle, args["seasons"], args["header_is_set"])
        else:
            values = select_by_year(handle, args["year"], args["header_is_set"])

    method = args["aggregate_by"]
    if method not in METHODS:
        print(f"I do not know the aggregation method {method}", file=sys.stderr)
        return
    print(f"{aggregate(values, method):g}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, aggregate the data file and print the result."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    args = {
        "file_path": Path(),
        "year": 0,
        "seasons": [],
        "aggregate_by": "mean",
        "header_is_set": False,
    }

    parser = FormatParse(arguments)
    _set_up(parser, args)
    try:
        parser.parse()
    except ParserError as error:
        print(f"[Winter has come] {error}", file=sys.stderr)
        return -1

    _run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())