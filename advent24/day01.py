"""Day 1: distances and similarity between two lists of location ids."""

from collections import Counter


def _columns(text):
    """Split whitespace-separated pairs into left and right columns."""
    numbers = [int(token) for token in text.split()]
    pairs = list(zip(numbers[0::2], numbers[1::2]))
    left = [a for a, _ in pairs]
    right = [b for _, b in pairs]
    return left, right


def part1(text):
    """Total distance between the sorted left and right columns."""
    left, right = _columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left id times how often it appears on the right."""
    left, right = _columns(text)
    left_counts = Counter(left)
    right_counts = Counter(right)
    return sum(
        count * value * right_counts[value] for value, count in left_counts.items()
    )