"""Day 2: safety of reactor level reports."""


def _reports(text):
    return [[int(token) for token in line.split()] for line in text.splitlines()]


def _first_violation(levels):
    """Index of the first adjacent pair that breaks the safety rules, or None."""
    increasing = None
    for index, (current, following) in enumerate(zip(levels, levels[1:])):
        diff = following - current
        if increasing is None:
            increasing = diff > 0
        if not (1 <= abs(diff) <= 3 and increasing == (diff > 0)):
            return index
    return None


def _is_safe(levels):
    return _first_violation(levels) is None


def _without(levels, removed):
    return [level for index, level in enumerate(levels) if index != removed]


def _is_safe_with_dampener(levels):
    index = _first_violation(levels)
    if index is None:
        return True
    return any(
        _is_safe(_without(levels, candidate)) for candidate in (index, index + 1, 0)
    )


def part1(text):
    """Number of reports that are safe as they stand."""
    return sum(_is_safe(levels) for levels in _reports(text))


def part2(text):
    """Number of reports that are safe once one bad level may be dropped."""
    return sum(_is_safe_with_dampener(levels) for levels in _reports(text))