import pytest

from aoc2024.day05 import part1, part2

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13
"""

ORDERED = """75,47,61,53,29
97,61,53,29,13
75,29,13
"""

MISORDERED = """75,97,47,61,53
61,13,29
97,13,75,29,47
"""

EXAMPLE = RULES + "\n" + ORDERED + MISORDERED


def test_part1_example():
    assert part1(EXAMPLE) == 143


def test_part2_example():
    assert part2(EXAMPLE) == 123


def test_part2_ignores_ordered_updates():
    assert part2(EXAMPLE) == part2(RULES + "\n" + MISORDERED)


def test_part1_ignores_misordered_updates():
    assert part1(EXAMPLE) == part1(RULES + "\n" + ORDERED)


def test_no_updates_sum_to_nothing():
    assert part1(RULES) == part2(RULES)


def test_reordered_update_becomes_ordered():
    assert part1(RULES + "\n97,13,75,29,47\n") == part1(RULES)
    fixed = part2(RULES + "\n97,13,75,29,47\n")
    assert part1(RULES + "\n97,75,47,29,13\n") == fixed


def test_page_out_of_range_raises():
    with pytest.raises(ValueError):
        part1(RULES + "\n300,1,2\n")