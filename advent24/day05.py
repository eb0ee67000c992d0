"""Day 5: page ordering rules for print updates."""

from itertools import combinations


def _parse(text):
    lines = iter(text.splitlines())
    rules = {}
    for line in lines:
        if len(line) <= 1:
            break
        before, _, after = line.partition("|")
        rules.setdefault(int(before), set()).add(int(after))
    updates = []
    for line in lines:
        pages = [int(token) for token in line.split(",") if token.strip()]
        if pages:
            updates.append(pages)
    return rules, updates


def _in_order(update, rules):
    return all(
        later in rules.get(earlier, ()) for earlier, later in combinations(update, 2)
    )


def _reorder(update, rules):
    """Insert pages one by one before the first page not required to precede them."""
    ordered = []
    changed = False
    for page in update:
        position = next(
            (
                index
                for index, placed in enumerate(ordered)
                if page not in rules.get(placed, ())
            ),
            None,
        )
        if position is None:
            ordered.append(page)
        else:
            ordered.insert(position, page)
            changed = True
    return ordered, changed


def part1(text):
    """Sum of middle pages of the updates already in order."""
    rules, updates = _parse(text)
    return sum(
        update[len(update) // 2] for update in updates if _in_order(update, rules)
    )


def part2(text):
    """Sum of middle pages of the updates that had to be reordered."""
    rules, updates = _parse(text)
    total = 0
    for update in updates:
        ordered, changed = _reorder(update, rules)
        if changed:
            total += ordered[len(ordered) // 2]
    return total