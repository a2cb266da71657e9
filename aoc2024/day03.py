"""Day 3: add up the products of well-formed mul instructions."""

import re

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)", re.ASCII)
_DISABLE = "don't()"
_ENABLE = "do()"


def _sum_products(text: str, start: int = 0, end: int | None = None) -> int:
    if end is None:
        end = len(text)
    return sum(
        int(match[1]) * int(match[2]) for match in _MUL.finditer(text, start, end)
    )


def part1(text: str) -> int:
    """Sum of every mul(a,b) product in the text."""
    return _sum_products(text)


def part2(text: str) -> int:
    """Sum of mul products, skipping stretches between don't() and do()."""
    total = 0
    pos = 0
    while pos < len(text):
        stop = text.find(_DISABLE, pos)
        if stop == -1:
            total += _sum_products(text, pos)
            break
        total += _sum_products(text, pos, stop)
        resume = text.find(_ENABLE, stop)
        pos = len(text) if resume == -1 else resume
    return total