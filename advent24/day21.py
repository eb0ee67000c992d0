"""Day 21: chains of robots typing door codes on keypads."""

from functools import cache
from itertools import permutations

_NUMERIC = ("789", "456", "123", " 0A")
_DIRECTIONAL = (" ^A", "<v>")
_STEPS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}


def _shortest_paths(rows):
    """Every shortest move sequence between each pair of keys, avoiding the gap."""
    keys = {
        char: (row, col)
        for row, line in enumerate(rows)
        for col, char in enumerate(line)
        if char != " "
    }
    gap = next(
        (row, col)
        for row, line in enumerate(rows)
        for col, char in enumerate(line)
        if char == " "
    )
    paths = {}
    for start, (r0, c0) in keys.items():
        for goal, (r1, c1) in keys.items():
            moves = ("v" if r1 > r0 else "^") * abs(r1 - r0)
            moves += (">" if c1 > c0 else "<") * abs(c1 - c0)
            options = []
            for order in sorted(set(permutations(moves))):
                row, col = r0, c0
                for move in order:
                    d_row, d_col = _STEPS[move]
                    row, col = row + d_row, col + d_col
                    if (row, col) == gap:
                        break
                else:
                    options.append("".join(order))
            paths[(start, goal)] = tuple(options)
    return paths


_NUMERIC_PATHS = _shortest_paths(_NUMERIC)
_DIRECTIONAL_PATHS = _shortest_paths(_DIRECTIONAL)


def _press_cost(paths, start, goal, depth):
    """Fewest human presses to move from start to goal and press goal."""
    options = paths.get((start, goal))
    if options is None:
        raise ValueError(f"no key path from {start!r} to {goal!r}")
    if depth == 0:
        return min(len(path) + 1 for path in options)
    return min(_directional_typing_cost(path + "A", depth - 1) for path in options)


@cache
def _directional_cost(start, goal, depth):
    return _press_cost(_DIRECTIONAL_PATHS, start, goal, depth)


def _directional_typing_cost(sequence, depth):
    return sum(
        _directional_cost(start, goal, depth)
        for start, goal in zip("A" + sequence, sequence)
    )


def _code_length(code, robots):
    return sum(
        _press_cost(_NUMERIC_PATHS, start, goal, robots)
        for start, goal in zip("A" + code, code)
    )


def complexity(codes, robots):
    """Sum of numeric part times shortest press count, with robots directional keypads between."""
    if robots < 0:
        raise ValueError("the number of robots cannot be negative")
    total = 0
    for code in codes:
        if not code:
            raise ValueError("empty door code")
        try:
            number = int(code[:-1])
        except ValueError as error:
            raise ValueError(f"door code {code!r} has no numeric part") from error
        total += number * _code_length(code, robots)
    return total


def _codes(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def part1(text):
    """Total complexity with two directional robots."""
    return complexity(_codes(text), 2)


def part2(text):
    """Total complexity with twenty-five directional robots."""
    return complexity(_codes(text), 25)