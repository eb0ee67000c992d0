"""Day 14: robots patrolling a wrapping bathroom floor."""

import math
import re
from collections import Counter

_WIDTH = 101
_HEIGHT = 103


def _robots(text):
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(token) for token in re.findall(r"-?\d+", line)]
        if len(numbers) < 4:
            raise ValueError(f"expected position and velocity in {line!r}")
        px, py, vx, vy = numbers[:4]
        robots.append(((px, py), (vx, vy)))
    return robots


def _positions(robots, width, height, steps):
    return [
        ((px + vx * steps) % width, (py + vy * steps) % height)
        for (px, py), (vx, vy) in robots
    ]


def part1(text, width=_WIDTH, height=_HEIGHT, steps=100):
    """Safety factor: product of robot counts in the four quadrants."""
    half_width, half_height = width // 2, height // 2
    quadrants = Counter(
        (x > half_width, y > half_height)
        for x, y in _positions(_robots(text), width, height, steps)
        if x != half_width and y != half_height
    )
    return math.prod(
        quadrants[(right, lower)] for right in (False, True) for lower in (False, True)
    )


def frames(text, width=_WIDTH, height=_HEIGHT, steps=10_000):
    """Yield (step index, picture) after each second, one line per x column."""
    robots = _robots(text)
    for step in range(steps):
        occupied = set(_positions(robots, width, height, step + 1))
        picture = "\n".join(
            "".join("#" if (x, y) in occupied else " " for y in range(height))
            for x in range(width)
        )
        yield step, picture