import pytest

from aoc2024.day10 import part1, part2

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_rating_at_least_score():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_single_straight_trail_scores_and_rates_alike():
    assert part1("0123456789") == part2("0123456789")


@pytest.mark.parametrize("solve", [part1, part2])
def test_reversed_trail_is_equivalent(solve):
    assert solve("9876543210") == solve("0123456789")


@pytest.mark.parametrize("solve", [part1, part2])
def test_impassable_cells_are_ignored(solve):
    dotted = EXAMPLE.replace("8", ".")
    assert solve(dotted) <= solve(EXAMPLE)


@pytest.mark.parametrize("solve", [part1, part2])
def test_empty_map_raises(solve):
    with pytest.raises(ValueError):
        solve("")