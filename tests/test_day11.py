import pytest

from aoc2024.day11 import count_stones, part1, part2

EXAMPLE = "125 17\n"


def test_six_blinks_example():
    assert count_stones(EXAMPLE, 6) == 22


def test_part1_example():
    assert part1(EXAMPLE) == 55312


def test_zero_blinks_counts_input():
    assert count_stones(EXAMPLE, 0) == len(EXAMPLE.split())


def test_even_digits_split_in_two():
    assert count_stones("1000", 1) == 2 * count_stones("1000", 0)


def test_odd_digits_do_not_split():
    assert count_stones("0", 1) == count_stones("0", 0)


def test_count_is_additive_over_stones():
    assert count_stones(EXAMPLE, 15) == count_stones("125", 15) + count_stones(
        "17", 15
    )


def test_count_never_decreases():
    counts = [count_stones(EXAMPLE, n) for n in range(20)]
    assert counts == sorted(counts)


def test_parts_match_blink_counts():
    assert part1("0 1") == count_stones("0 1", 25)
    assert part2("0 1") == count_stones("0 1", 75)


def test_invalid_stone_raises():
    with pytest.raises(ValueError):
        count_stones("12 x", 1)