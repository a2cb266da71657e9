"""Day 2: check reactor reports for safe level changes."""

from collections.abc import Sequence


def _steps_within(levels: Sequence[int], sign: int) -> bool:
    return all(1 <= sign * (b - a) <= 3 for a, b in zip(levels, levels[1:]))


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels strictly rise or strictly fall by 1 to 3 each step."""
    levels = list(levels)
    return _steps_within(levels, -1) or _steps_within(levels, 1)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True when removing exactly one level leaves a safe report."""
    levels = list(levels)
    if not levels:
        raise ValueError("a report needs at least one level")
    return any(
        is_safe(levels[:skip] + levels[skip + 1 :]) for skip in range(len(levels))
    )


def _reports(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split()] for line in text.splitlines()]


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in _reports(text))


def part2(text: str) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_with_dampener(report) for report in _reports(text))