import pytest

from aoc2024.day08 import part1, part2

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def _transpose(text: str) -> str:
    lines = text.splitlines()
    return "\n".join("".join(column) for column in zip(*lines)) + "\n"


def _mirror(text: str) -> str:
    return "\n".join(line[::-1] for line in text.splitlines()) + "\n"


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


@pytest.mark.parametrize("solve", [part1, part2])
def test_transposed_map_gives_same_count(solve):
    assert solve(_transpose(EXAMPLE)) == solve(EXAMPLE)


@pytest.mark.parametrize("solve", [part1, part2])
def test_mirrored_map_gives_same_count(solve):
    assert solve(_mirror(EXAMPLE)) == solve(EXAMPLE)


@pytest.mark.parametrize("solve", [part1, part2])
def test_lone_antenna_of_new_frequency_changes_nothing(solve):
    lines = EXAMPLE.splitlines()
    lines[0] = "z" + lines[0][1:]
    assert solve("\n".join(lines) + "\n") == solve(EXAMPLE)


def test_part2_covers_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_empty_map_has_no_antinodes():
    assert part1("") == part2("") == 0