"""Day 22: monkey market secret numbers and banana prices."""

from collections import defaultdict

_MODULUS = 16777216
_ROUNDS = 2000
_WINDOW = 4


def next_secret(secret):
    """The secret number that follows the given one."""
    secret = ((secret * 64) ^ secret) % _MODULUS
    secret = ((secret // 32) ^ secret) % _MODULUS
    secret = ((secret * 2048) ^ secret) % _MODULUS
    return secret


def _chain(secret, rounds):
    """The initial secret followed by the given number of successors."""
    yield secret
    for _ in range(rounds):
        secret = next_secret(secret)
        yield secret


def _buyers(text):
    return [int(line) for line in text.splitlines() if line.strip()]


def part1(text):
    """Sum of every buyer's 2000th generated secret."""
    total = 0
    for secret in _buyers(text):
        *_, last = _chain(secret, _ROUNDS)
        total += last
    return total


def part2(text):
    """Most bananas obtainable with a single sequence of four price changes."""
    totals = defaultdict(int)
    for secret in _buyers(text):
        prices = [value % 10 for value in _chain(secret, _ROUNDS)]
        changes = [after - before for before, after in zip(prices, prices[1:])]
        seen = set()
        for index in range(_WINDOW, len(prices)):
            key = tuple(changes[index - _WINDOW:index])
            if key not in seen:
                seen.add(key)
                totals[key] += prices[index]
    return max(totals.values(), default=0)