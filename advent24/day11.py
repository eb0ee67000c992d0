"""Day 11: plutonian stones that change on every blink."""

from functools import cache


@cache
def _expand(stone, blinks):
    if blinks == 0:
        return 1
    if stone == 0:
        return _expand(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _expand(int(digits[:half]), blinks - 1) + _expand(int(digits[half:]), blinks - 1)
    return _expand(stone * 2024, blinks - 1)


def count_stones(stones, blinks):
    """Number of stones after the given number of blinks."""
    return sum(_expand(stone, blinks) for stone in stones)


def _stones(text):
    return [int(token) for token in text.split()]


def part1(text):
    """Stones after 25 blinks."""
    return count_stones(_stones(text), 25)


def part2(text):
    """Stones after 75 blinks."""
    return count_stones(_stones(text), 75)