"""Day 5: check and repair print-queue page orderings."""

Rule = tuple[int, int]


def _page(token: str) -> int:
    if not (token.isascii() and token.isdigit()) or int(token) > 255:
        raise ValueError(f"invalid page number: {token!r}")
    return int(token)


def _is_rule(line: str) -> bool:
    return len(line) == 5 and line[2] == "|"


def _parse(text: str) -> tuple[list[Rule], list[list[int]]]:
    rules: list[Rule] = []
    updates: list[list[int]] = []
    for line in text.splitlines():
        if _is_rule(line):
            first, second = line.split("|")
            rules.append((_page(first), _page(second)))
        elif line and not (len(line) > 2 and line[2] == "|"):
            updates.append([_page(token) for token in line.split(",")])
    return rules, updates


def _applicable(update: list[int], rules: list[Rule]):
    for first, second in rules:
        if first in update and second in update:
            yield first, second


def _is_ordered(update: list[int], rules: list[Rule]) -> bool:
    return all(
        update.index(first) < update.index(second)
        for first, second in _applicable(update, rules)
    )


def _reorder(update: list[int], rules: list[Rule]) -> list[int]:
    pages = list(update)
    changed = True
    while changed:
        changed = False
        for first, second in rules:
            if first not in pages or second not in pages:
                continue
            pos_first = pages.index(first)
            pos_second = pages.index(second)
            if pos_first < pos_second:
                continue
            pages.pop(pos_second)
            pages.insert(pos_first, second)
            changed = True
    return pages


def _middle(update: list[int]) -> int:
    return update[len(update) // 2]


def part1(text: str) -> int:
    """Sum of middle pages of updates already in the right order."""
    rules, updates = _parse(text)
    return sum(_middle(u) for u in updates if _is_ordered(u, rules))


def part2(text: str) -> int:
    """Sum of middle pages of misordered updates after reordering them."""
    rules, updates = _parse(text)
    return sum(
        _middle(_reorder(u, rules)) for u in updates if not _is_ordered(u, rules)
    )