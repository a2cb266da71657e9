"""Command line entry point that prints both answers for a puzzle day."""

import argparse
import sys
from types import ModuleType

from aoc2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
)

_SOLVERS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
}

AVAILABLE_DAYS: tuple[int, ...] = tuple(sorted(_SOLVERS))


def run_day(day: int, text: str) -> tuple[int, int]:
    """Solve both parts of the given day for the puzzle input text."""
    try:
        solver = _SOLVERS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    return solver.part1(text), solver.part2(text)


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2024",
        description="Print the answers to both parts of a puzzle day.",
    )
    parser.add_argument(
        "day",
        type=int,
        choices=AVAILABLE_DAYS,
        metavar="DAY",
        help=f"puzzle day, {AVAILABLE_DAYS[0]} to {AVAILABLE_DAYS[-1]}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="puzzle input file; standard input when omitted or '-'",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the solver for one day and print its two answers."""
    args = _parser().parse_args(argv)
    try:
        text = _read_input(args.input)
        first, second = run_day(args.day, text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Part 1: Answer {first}")
    print(f"Part 2: Answer {second}")
    return 0


if __name__ == "__main__":
    sys.exit(main())