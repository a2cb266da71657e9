"""Day 7: find operator combinations that make calibration equations true."""

import operator
from collections.abc import Callable, Sequence

Operation = Callable[[int, int], int]


def concat(a: int, b: int) -> int:
    """Join the decimal digits of b onto a; a zero b leaves a unchanged."""
    multiplier = 10 ** len(str(b)) if b > 0 else 1
    return a * multiplier + b


PART1_OPERATIONS: tuple[Operation, ...] = (operator.add, operator.mul)
PART2_OPERATIONS: tuple[Operation, ...] = (operator.add, operator.mul, concat)


def solve_equation(
    target: int, operands: Sequence[int], operations: Sequence[Operation]
) -> int | None:
    """Return target if some left-to-right choice of operations reaches it."""
    try:
        first, *rest = operands
    except ValueError:
        raise ValueError("an equation needs at least one operand") from None
    results = [first]
    for operand in rest:
        results = [
            value
            for previous in results
            for operation in operations
            if (value := operation(previous, operand)) <= target
        ]
    return target if target in results else None


def _equations(text: str):
    for line in text.splitlines():
        try:
            head, tail, *_ = line.split(":")
        except ValueError:
            raise ValueError(f"missing ':' in equation: {line!r}") from None
        yield int(head), [int(token) for token in tail.split()]


def _solve(text: str, operations: Sequence[Operation]) -> int:
    return sum(
        result
        for target, operands in _equations(text)
        if (result := solve_equation(target, operands, operations)) is not None
    )


def part1(text: str) -> int:
    """Total of solvable equations using + and *."""
    return _solve(text, PART1_OPERATIONS)


def part2(text: str) -> int:
    """Total of solvable equations using +, * and digit concatenation."""
    return _solve(text, PART2_OPERATIONS)