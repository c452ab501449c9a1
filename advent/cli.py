"""Command line entry point: solve one puzzle day from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from advent import (
    y2023_day19,
    y2023_day21,
    y2023_day22,
    y2023_day25,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
    y2024_day12,
    y2024_day13,
    y2024_day14,
)
from advent.parsing import read_input

Solver = Callable[[str, argparse.Namespace], object]

SOLVERS: dict[tuple[int, int], Solver] = {
    (2023, 19): lambda text, _: y2023_day19.solve(text),
    (2023, 21): lambda text, opts: y2023_day21.solve(text, opts.steps),
    (2023, 22): lambda text, _: y2023_day22.solve(text),
    (2023, 25): lambda text, _: y2023_day25.solve(text),
    (2024, 1): lambda text, _: y2024_day01.solve(text),
    (2024, 2): lambda text, _: y2024_day02.solve(text),
    (2024, 3): lambda text, _: y2024_day03.solve(text),
    (2024, 4): lambda text, _: y2024_day04.solve(text),
    (2024, 5): lambda text, _: y2024_day05.solve(text),
    (2024, 6): lambda text, _: y2024_day06.solve(text),
    (2024, 7): lambda text, _: y2024_day07.solve(text),
    (2024, 8): lambda text, _: y2024_day08.solve(text),
    (2024, 9): lambda text, _: y2024_day09.solve(text),
    (2024, 10): lambda text, _: y2024_day10.solve(text),
    (2024, 11): lambda text, _: y2024_day11.solve(text),
    (2024, 12): lambda text, _: y2024_day12.solve(text),
    (2024, 13): lambda text, _: y2024_day13.solve(text),
    (2024, 14): lambda text, opts: y2024_day14.solve(text, opts.rows, opts.cols),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent", description="Solve a puzzle day.")
    parser.add_argument("year", type=int, help="puzzle year")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("input", help="path of the puzzle input file")
    parser.add_argument(
        "--steps", type=int, default=y2023_day21.DEFAULT_STEPS, help="steps for 2023 day 21"
    )
    parser.add_argument("--rows", type=int, default=y2024_day14.ROWS, help="rows for 2024 day 14")
    parser.add_argument("--cols", type=int, default=y2024_day14.COLS, help="columns for 2024 day 14")
    return parser


def _format(year: int, day: int, result: object) -> str:
    if isinstance(result, str):
        return result
    parts = result if isinstance(result, tuple) else (result,)
    return "".join(
        f"{year}: Day {day:02d} part {number}: {value}\n"
        for number, value in enumerate(parts, start=1)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver for the requested day and print its answers."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    solver = SOLVERS.get((args.year, args.day))
    if solver is None:
        parser.error(f"no solver for {args.year} day {args.day}")
    try:
        text = read_input(args.input)
    except OSError as error:
        print(f"Error reading {args.input}: {error}", file=sys.stderr)
        return 1
    try:
        result = solver(text, args)
    except ValueError as error:
        print(f"Error solving {args.input}: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(_format(args.year, args.day, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())