"""Day 4: word search for XMAS and crossed MAS."""

_LINES = ((0, 1), (1, 0), (1, -1), (1, 1))


def _spells(grid, row, col, step, word):
    d_row, d_col = step
    for offset, char in enumerate(word):
        r = row + d_row * offset
        c = col + d_col * offset
        if r < 0 or c < 0 or r >= len(grid) or c >= len(grid[r]) or grid[r][c] != char:
            return False
    return True


def part1(text):
    """Occurrences of XMAS in any direction."""
    grid = text.split()
    words = {"X": "XMAS", "S": "SAMX"}
    total = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            word = words.get(char)
            if word is not None:
                total += sum(_spells(grid, row, col, step, word) for step in _LINES)
    return total


def part2(text):
    """Number of X-shaped pairs of MAS crossing on an A."""
    grid = text.split()
    total = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != "A" or row < 1:
                continue
            falling = col >= 1 and any(
                _spells(grid, row - 1, col - 1, (1, 1), word) for word in ("MAS", "SAM")
            )
            rising = col + 1 < len(line) and any(
                _spells(grid, row - 1, col + 1, (1, -1), word) for word in ("MAS", "SAM")
            )
            total += falling and rising
    return total