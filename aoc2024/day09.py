"""Day 9: compact a dense disk map and compute the filesystem checksum."""


def _digits(text: str) -> list[int]:
    disk_map = text.strip()
    if not (disk_map.isascii() and disk_map.isdigit()):
        raise ValueError("the disk map must consist of digits only")
    return [int(ch) for ch in disk_map]


def part1(text: str) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    disk: list[int | None] = []
    for index, length in enumerate(_digits(text)):
        disk.extend([index // 2 if index % 2 == 0 else None] * length)
    front, back = 0, len(disk) - 1
    while front < back:
        if disk[front] is None:
            while back > front and disk[back] is None:
                back -= 1
            if back == front:
                break
            disk[front], disk[back] = disk[back], None
            back -= 1
        front += 1
    return sum(pos * file_id for pos, file_id in enumerate(disk) if file_id is not None)


def part2(text: str) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost fit."""
    files: list[tuple[int, int]] = []  # (start, size) indexed by file id
    gaps: list[list[int]] = []  # [start, size] in disk order
    pos = 0
    for index, length in enumerate(_digits(text)):
        if index % 2 == 0:
            files.append((pos, length))
        elif length:
            gaps.append([pos, length])
        pos += length
    for file_id in reversed(range(len(files))):
        start, size = files[file_id]
        for gap in gaps:
            if gap[0] >= start:
                break
            if gap[1] >= size:
                files[file_id] = (gap[0], size)
                gap[0] += size
                gap[1] -= size
                break
    return sum(
        file_id * (size * start + size * (size - 1) // 2)
        for file_id, (start, size) in enumerate(files)
    )