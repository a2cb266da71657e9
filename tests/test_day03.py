from aoc2024.day03 import part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE1) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_part2_equals_part1_without_disable():
    assert part2(EXAMPLE1) == part1(EXAMPLE1)


def test_four_digit_numbers_are_ignored():
    assert part1("mul(1234,5)") == part1("nothing here")


def test_single_product():
    assert part1("mul(6,7)") == 6 * 7


def test_disable_without_enable_drops_rest():
    text = "mul(2,3)don't()mul(100,100)mul(4,4)"
    assert part2(text) == part1("mul(2,3)")


def test_reenabled_section_counts():
    text = "mul(2,3)don't()mul(9,9)do()mul(4,5)"
    assert part2(text) == part1("mul(2,3)mul(4,5)")


def test_part2_never_exceeds_part1():
    assert part2(EXAMPLE2) <= part1(EXAMPLE2)