"""Day 8: antinodes of resonant antennas."""

from collections import defaultdict
from itertools import permutations


def _parse(text):
    grid = text.splitlines()
    antennas = defaultdict(list)
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != ".":
                antennas[char].append((row, col))
    height = len(grid)
    width = len(grid[0]) if grid else 0
    return antennas, height, width


def _pairs(antennas):
    for positions in antennas.values():
        yield from permutations(positions, 2)


def part1(text):
    """Distinct in-bounds antinodes placed once beyond each antenna pair."""
    antennas, height, width = _parse(text)
    antinodes = set()
    for (r0, c0), (r1, c1) in _pairs(antennas):
        row, col = 2 * r0 - r1, 2 * c0 - c1
        if 0 <= row < height and 0 <= col < width:
            antinodes.add((row, col))
    return len(antinodes)


def part2(text):
    """Distinct in-bounds antinodes along the whole line of each antenna pair."""
    antennas, height, width = _parse(text)
    antinodes = set()
    for (r0, c0), (r1, c1) in _pairs(antennas):
        d_row, d_col = r0 - r1, c0 - c1
        row, col = r0, c0
        while 0 <= row < height and 0 <= col < width:
            antinodes.add((row, col))
            row, col = row + d_row, col + d_col
    return len(antinodes)