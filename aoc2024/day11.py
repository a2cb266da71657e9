"""Day 11: count stones that split and change with every blink."""

from collections import Counter


def _blink(stones: Counter[int]) -> Counter[int]:
    after: Counter[int] = Counter()
    for stone, count in stones.items():
        if stone == 0:
            after[1] += count
            continue
        digits = str(stone)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            after[int(digits[:half])] += count
            after[int(digits[half:])] += count
        else:
            after[stone * 2024] += count
    return after


def count_stones(text: str, blinks: int) -> int:
    """Number of stones after the given number of blinks."""
    stones = Counter(int(token) for token in text.split())
    for _ in range(blinks):
        stones = _blink(stones)
    return sum(stones.values())


def part1(text: str) -> int:
    """Stone count after 25 blinks."""
    return count_stones(text, 25)


def part2(text: str) -> int:
    """Stone count after 75 blinks."""
    return count_stones(text, 75)