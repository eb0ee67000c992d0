"""Day 10: hiking trails on a topographic map."""

_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_DIGITS = "0123456789"


def _heights(text):
    return {
        (row, col): int(char)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
        if char in _DIGITS
    }


def _trail_ends(heights, position):
    """Yield the summit reached by every distinct trail from position."""
    height = heights[position]
    if height == 9:
        yield position
        return
    row, col = position
    for d_row, d_col in _STEPS:
        following = (row + d_row, col + d_col)
        if heights.get(following) == height + 1:
            yield from _trail_ends(heights, following)


def _trailheads(heights):
    return [position for position, height in heights.items() if height == 0]


def part1(text):
    """Sum over trailheads of the number of distinct summits reachable."""
    heights = _heights(text)
    return sum(len(set(_trail_ends(heights, head))) for head in _trailheads(heights))


def part2(text):
    """Sum over trailheads of the number of distinct trails."""
    heights = _heights(text)
    return sum(sum(1 for _ in _trail_ends(heights, head)) for head in _trailheads(heights))