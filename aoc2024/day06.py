"""Day 6: follow a patrolling guard and find obstacles that trap it in a loop."""

from dataclasses import dataclass

Position = tuple[int, int]

# Up, right, down, left: the guard starts facing up and turns right.
_DIRECTIONS: tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class _Lab:
    height: int
    width: int
    obstacles: frozenset[Position]
    start: Position

    def inside(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width


def _parse(text: str) -> _Lab:
    rows = text.splitlines()
    if not rows:
        raise ValueError("the lab map is empty")
    obstacles = frozenset(
        (r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "#"
    )
    start = next(
        ((r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "^"),
        None,
    )
    if start is None:
        raise ValueError("the lab map has no guard '^'")
    return _Lab(len(rows), len(rows[0]), obstacles, start)


def _ahead(pos: Position, direction: int) -> Position:
    dr, dc = _DIRECTIONS[direction]
    return pos[0] + dr, pos[1] + dc


def _escapes(
    lab: _Lab,
    obstacles: frozenset[Position],
    pos: Position,
    direction: int,
    history: dict[Position, int],
) -> bool:
    """Walk from a state with the given past; False when a state repeats."""
    visited: set[tuple[Position, int]] = set()
    while lab.inside(pos):
        if history.get(pos, 0) & (1 << direction) or (pos, direction) in visited:
            return False
        visited.add((pos, direction))
        ahead = _ahead(pos, direction)
        if ahead in obstacles:
            direction = (direction + 1) % 4
        else:
            pos = ahead
    return True


def _mark(history: dict[Position, int], pos: Position, direction: int) -> None:
    bit = 1 << direction
    if history.get(pos, 0) & bit:
        raise ValueError("the guard never leaves the map")
    history[pos] = history.get(pos, 0) | bit


def part1(text: str) -> int:
    """Number of distinct positions the guard visits before leaving the map."""
    lab = _parse(text)
    pos, direction = lab.start, 0
    visited: set[Position] = set()
    states: set[tuple[Position, int]] = set()
    while lab.inside(pos):
        if (pos, direction) in states:
            raise ValueError("the guard never leaves the map")
        states.add((pos, direction))
        visited.add(pos)
        ahead = _ahead(pos, direction)
        if ahead in lab.obstacles:
            direction = (direction + 1) % 4
        else:
            pos = ahead
    return len(visited)


def part2(text: str) -> int:
    """Number of positions where one new obstacle makes the guard loop forever."""
    lab = _parse(text)
    pos, direction = lab.start, 0
    history: dict[Position, int] = {}
    loops = 0
    while lab.inside(pos):
        ahead = _ahead(pos, direction)
        if ahead in lab.obstacles:
            _mark(history, pos, direction)
            direction = (direction + 1) % 4
            continue
        if lab.inside(ahead) and ahead not in history:
            if not _escapes(lab, lab.obstacles | {ahead}, pos, direction, history):
                loops += 1
        _mark(history, pos, direction)
        pos = ahead
    return loops