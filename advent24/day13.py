"""Day 13: claw machines and the cheapest way to win their prizes."""

import re
from dataclasses import dataclass

_PRIZE_OFFSET = 10_000_000_000_000
_PRESS_LIMIT = 100
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class _Machine:
    a: tuple[int, int]
    b: tuple[int, int]
    prize: tuple[int, int]


def _pair(line):
    numbers = re.findall(r"\d+", line)
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers in {line!r}")
    return int(numbers[0]), int(numbers[1])


def _machines(text):
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) % 3:
        raise ValueError("each machine needs two button lines and a prize line")
    rows = iter(lines)
    return [
        _Machine(_pair(a_line), _pair(b_line), _pair(prize_line))
        for a_line, b_line, prize_line in zip(rows, rows, rows)
    ]


def _cheapest_by_search(machine):
    """Fewest tokens with fewer than a hundred presses per button, or 0."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    costs = [
        _COST_A * a + _COST_B * b
        for a in range(_PRESS_LIMIT)
        for b in range(_PRESS_LIMIT)
        if a * ax + b * bx == px and a * ay + b * by == py
    ]
    return min(costs, default=0)


def _cheapest_by_algebra(machine, offset):
    """Tokens for the unique integral solution of the press equations, or 0."""
    (ax, ay), (bx, by) = machine.a, machine.b
    px, py = machine.prize[0] + offset, machine.prize[1] + offset
    determinant = ax * by - bx * ay
    if determinant == 0:
        return 0
    numerator = ax * py - px * ay
    if numerator % determinant:
        return 0
    b = numerator // determinant
    remainder = px - bx * b
    if ax == 0 or remainder % ax:
        return 0
    a = remainder // ax
    return _COST_A * a + _COST_B * b


def part1(text):
    """Tokens needed to win every winnable prize with limited presses."""
    return sum(_cheapest_by_search(machine) for machine in _machines(text))


def part2(text):
    """Tokens needed once every prize lies ten trillion units further away."""
    return sum(
        _cheapest_by_algebra(machine, _PRIZE_OFFSET) for machine in _machines(text)
    )