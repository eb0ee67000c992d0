"""Day 9: compacting an amphipod disk map."""

from dataclasses import dataclass


@dataclass
class _Span:
    start: int
    size: int
    file_id: int = 0


def _disk_map(text):
    lines = text.splitlines()
    line = lines[0].strip() if lines else ""
    return [int(char) for char in line]


def part1(text):
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    blocks = []
    for index, size in enumerate(_disk_map(text)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def part2(text):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    files = []
    gaps = []
    position = 0
    for index, size in enumerate(_disk_map(text)):
        if index % 2 == 0:
            files.append(_Span(position, size, index // 2))
        else:
            gaps.append(_Span(position, size))
        position += size
    for file in reversed(files):
        for gap in gaps:
            if gap.start >= file.start:
                break
            if gap.size >= file.size:
                file.start = gap.start
                gap.start += file.size
                gap.size -= file.size
                break
    return sum(file.file_id * sum(range(file.start, file.start + file.size)) for file in files)