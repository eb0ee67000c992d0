"""Day 19: arranging towels into designs."""

from functools import cache


def _parse(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("no towel patterns given")
    patterns = frozenset(token.strip() for token in lines[0].split(",") if token.strip())
    designs = [line.strip() for line in lines[2:] if line.strip()]
    return patterns, designs


def _arrangements(design, patterns):
    """Number of ways to build the design from the patterns."""

    @cache
    def ways(index):
        if index == len(design):
            return 1
        return sum(
            ways(index + len(pattern))
            for pattern in patterns
            if design.startswith(pattern, index)
        )

    return ways(0)


def part1(text):
    """Number of designs that can be made at all."""
    patterns, designs = _parse(text)
    return sum(_arrangements(design, patterns) > 0 for design in designs)


def part2(text):
    """Total number of ways to make every design."""
    patterns, designs = _parse(text)
    return sum(_arrangements(design, patterns) for design in designs)