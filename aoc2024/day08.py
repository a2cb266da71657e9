"""Day 8: count antinodes produced by pairs of same-frequency antennas."""

from collections import defaultdict
from collections.abc import Callable, Iterator
from itertools import combinations

Position = tuple[int, int]


def _parse(text: str) -> tuple[Callable[[Position], bool], dict[str, list[Position]]]:
    lines = text.splitlines()
    height = len(lines)
    width = len(lines[-1]) if lines else 0
    antennas: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, ch in enumerate(line):
            if ch != ".":
                antennas[ch].append((row, col))

    def inside(pos: Position) -> bool:
        return 0 <= pos[0] < height and 0 <= pos[1] < width

    return inside, antennas


def _pairs(antennas: dict[str, list[Position]]) -> Iterator[tuple[Position, Position]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def _ray(
    start: Position, step: Position, inside: Callable[[Position], bool]
) -> Iterator[Position]:
    row, col = start
    while inside((row, col)):
        yield row, col
        row, col = row + step[0], col + step[1]


def part1(text: str) -> int:
    """Unique in-map antinodes one antenna spacing beyond each pair."""
    inside, antennas = _parse(text)
    nodes: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r2 - r1, c2 - c1
        for node in ((r2 + dr, c2 + dc), (r1 - dr, c1 - dc)):
            if inside(node):
                nodes.add(node)
    return len(nodes)


def part2(text: str) -> int:
    """Unique in-map positions in line with any pair, at whole-spacing steps."""
    inside, antennas = _parse(text)
    nodes: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r2 - r1, c2 - c1
        nodes.update(_ray((r2, c2), (dr, dc), inside))
        nodes.update(_ray((r1, c1), (-dr, -dc), inside))
    return len(nodes)