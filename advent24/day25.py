"""Day 25: matching key and lock schematics."""

from itertools import product


def _schematics(text):
    """Yield (is_key, rows, column heights) for every schematic block."""
    block = []
    for line in text.splitlines() + [""]:
        line = line.rstrip("\r")
        if len(line) > 1:
            block.append(line)
            continue
        if block:
            is_key = all(char == "." for char in block[0])
            heights = [
                sum(row[col] == "#" for row in block) for col in range(len(block[0]))
            ]
            yield is_key, len(block), heights
            block = []


def part1(text):
    """Number of key and lock pairs that fit without overlapping."""
    keys = []
    locks = []
    for is_key, height, heights in _schematics(text):
        (keys if is_key else locks).append((height, heights))
    return sum(
        all(a + b <= height for a, b in zip(key, lock))
        for (height, key), (_, lock) in product(keys, locks)
    )