"""Day 23: LAN party computer networks."""

from collections import defaultdict


def _graph(text):
    links = defaultdict(set)
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        left, sep, right = line.partition("-")
        if not sep or not left or not right:
            raise ValueError(f"expected 'a-b' in {line!r}")
        links[left].add(right)
        links[right].add(left)
    return links


def part1(text):
    """Number of three-computer cliques with a computer whose name starts with t."""
    links = _graph(text)
    count = 0
    for a in links:
        for b in links[a]:
            if b <= a:
                continue
            for c in links[a] & links[b]:
                if c <= b:
                    continue
                if any(name.startswith("t") for name in (a, b, c)):
                    count += 1
    return count


def _largest_clique(links):
    best = set()

    def expand(clique, candidates, excluded):
        nonlocal best
        if not candidates and not excluded:
            if len(clique) > len(best):
                best = clique
            return
        if len(clique) + len(candidates) <= len(best):
            return
        pivot = max(candidates | excluded, key=lambda node: len(links[node] & candidates))
        for node in list(candidates - links[pivot]):
            expand(clique | {node}, candidates & links[node], excluded & links[node])
            candidates = candidates - {node}
            excluded = excluded | {node}

    expand(set(), set(links), set())
    return best


def part2(text):
    """Password of the LAN party: the largest clique's names, sorted and comma separated."""
    links = _graph(text)
    if not links:
        raise ValueError("no connections given")
    return ",".join(sorted(_largest_clique(links)))