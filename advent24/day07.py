"""Day 7: calibration equations with missing operators."""

from operator import add, mul


def _concat(left, right):
    """Append the digits of right to left; a zero right operand leaves left as it is."""
    if right <= 0:
        return left
    return left * 10 ** len(str(right)) + right


def _equations(text):
    for line in text.splitlines():
        if not line.strip():
            continue
        head, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in equation line {line!r}")
        numbers = [int(token) for token in rest.split()]
        if not numbers:
            raise ValueError(f"no operands in equation line {line!r}")
        yield int(head), numbers


def _solvable(goal, numbers, operators):
    first, *rest = numbers
    values = {first}
    for index, number in enumerate(rest):
        values = {op(value, number) for value in values for op in operators}
        # With only positive operands ahead no operator can shrink a value.
        if min(rest[index + 1:], default=1) >= 1:
            values = {value for value in values if value <= goal}
    return goal in values


def _total(text, operators):
    return sum(
        goal for goal, numbers in _equations(text) if _solvable(goal, numbers, operators)
    )


def part1(text):
    """Sum of test values reachable with + and *."""
    return _total(text, (mul, add))


def part2(text):
    """Sum of test values reachable with +, * and concatenation."""
    return _total(text, (mul, add, _concat))