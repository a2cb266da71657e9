# aoc2024

Solutions to the Advent of Code 2024 puzzles for days 1 to 11. Each day has its own module, `aoc2024.day01` through `aoc2024.day11`. Every module has two functions, `part1(text)` and `part2(text)`. Each takes the puzzle input as a string and returns the answer as an integer. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Pass a day number from 1 to 11 and the path to your puzzle input:

```
aoc2024 1 input01.txt
```

If you leave out the path, or give `-`, the input is read from standard input:

```
aoc2024 1 < input01.txt
```

The command prints both answers:

```
Part 1: Answer 11
Part 2: Answer 31
```

If the file cannot be read or the input is malformed, the command prints `error: ...` to standard error and exits with status 1. A day outside 1 to 11 is rejected by the argument parser.

## Library use

```python
from aoc2024 import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.part1(text))  # 11
print(day01.part2(text))  # 31
```

Some modules also expose helpers of their own:

- `aoc2024.day02.is_safe(levels)` returns whether a report's levels strictly rise or strictly fall by 1 to 3 at each step.
- `aoc2024.day02.is_safe_with_dampener(levels)` returns whether the report becomes safe once exactly one level is removed. It raises `ValueError` for an empty report.
- `aoc2024.day07.concat(a, b)` appends the decimal digits of `b` to `a`. For example, `concat(12, 345)` is `12345`.
- `aoc2024.day07.solve_equation(target, operands, operations)` tries every combination of the given two-argument operations, applied left to right. It returns `target` if one of them reaches it and `None` otherwise. `PART1_OPERATIONS` holds addition and multiplication. `PART2_OPERATIONS` adds `concat` to those two.
- `aoc2024.day11.count_stones(text, blinks)` returns the number of stones after any number of blinks.

From code, `aoc2024.cli.run_day(day, text)` returns both answers for a day as a pair. It raises `ValueError` for a day that has no solution. `aoc2024.cli.AVAILABLE_DAYS` lists the days that do have one.

Malformed input raises `ValueError`. Examples are a line without two numbers on day 1, a map with no guard on day 6, a guard that never leaves the map on day 6, and a disk map with non-digit characters on day 9.

## Limitations

- Only days 1 to 11 are solved. There are no modules for days 12 to 25.
- The package does not download puzzle inputs. You supply the text yourself, either as a file, on standard input, or as a string.