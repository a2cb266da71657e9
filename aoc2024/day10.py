"""Day 10: score and rate hiking trails that climb from height 0 to 9."""

from collections.abc import Iterator
from functools import cache

Position = tuple[int, int]

_DIRECTIONS: tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _parse(text: str) -> dict[Position, int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("the topographic map is empty")
    return {
        (row, col): int(ch)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if ch.isascii() and ch.isdigit()
    }


def _uphill(heights: dict[Position, int], pos: Position) -> Iterator[Position]:
    target = heights[pos] + 1
    for dr, dc in _DIRECTIONS:
        step = (pos[0] + dr, pos[1] + dc)
        if heights.get(step) == target:
            yield step


def _trailheads(heights: dict[Position, int]) -> Iterator[Position]:
    return (pos for pos, height in heights.items() if height == 0)


def part1(text: str) -> int:
    """Sum over trailheads of how many distinct 9s each can reach."""
    heights = _parse(text)
    total = 0
    for head in _trailheads(heights):
        frontier = {head}
        for _ in range(9):
            frontier = {step for pos in frontier for step in _uphill(heights, pos)}
        total += len(frontier)
    return total


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to any 9."""
    heights = _parse(text)

    @cache
    def rating(pos: Position) -> int:
        if heights[pos] == 9:
            return 1
        return sum(rating(step) for step in _uphill(heights, pos))

    return sum(rating(head) for head in _trailheads(heights))