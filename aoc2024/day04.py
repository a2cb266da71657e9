"""Day 4: word search for XMAS and crossed MAS shapes."""

_DIRECTIONS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)
_WORD = "XMAS"
_DIAGONALS = {"MAS", "SAM"}


def _grid(text: str) -> list[str]:
    grid = text.splitlines()
    if not grid:
        raise ValueError("the word search is empty")
    return grid


def _spells(grid: list[str], row: int, col: int, dr: int, dc: int) -> bool:
    for step, letter in enumerate(_WORD):
        r, c = row + step * dr, col + step * dc
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            return False
        if grid[r][c] != letter:
            return False
    return True


def part1(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = _grid(text)
    return sum(
        _spells(grid, row, col, dr, dc)
        for row, line in enumerate(grid)
        for col in range(len(line))
        for dr, dc in _DIRECTIONS
    )


def part2(text: str) -> int:
    """Number of 3x3 windows whose two diagonals both read MAS either way."""
    grid = _grid(text)
    count = 0
    for row in range(len(grid) - 2):
        top, mid, bottom = grid[row : row + 3]
        width = min(len(top), len(mid), len(bottom))
        for col in range(width - 2):
            falling = top[col] + mid[col + 1] + bottom[col + 2]
            rising = top[col + 2] + mid[col + 1] + bottom[col]
            if falling in _DIAGONALS and rising in _DIAGONALS:
                count += 1
    return count