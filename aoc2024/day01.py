"""Day 1: compare two columns of location ids."""

from collections import Counter


def _columns(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right columns of integers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        try:
            first, second, *_ = line.split()
        except ValueError:
            raise ValueError(f"expected two numbers on line: {line!r}") from None
        left.append(int(first))
        right.append(int(second))
    return left, right


def part1(text: str) -> int:
    """Sum of distances between the sorted columns, paired position by position."""
    left, right = _columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left value times how often it appears on the right."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)