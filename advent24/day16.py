"""Day 16: the reindeer maze, scored by steps and turns."""

import heapq
from collections import defaultdict

_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EAST = 1
_STEP_COST = 1
_TURN_COST = 1000


def _parse(text):
    open_cells = set()
    start = end = None
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char == "#":
                continue
            open_cells.add((row, col))
            if char == "S":
                start = (row, col)
            elif char == "E":
                end = (row, col)
    if start is None:
        raise ValueError("no start 'S' found in the maze")
    if end is None:
        raise ValueError("no end 'E' found in the maze")
    return open_cells, start, end


def _best_paths(open_cells, start, end):
    """Lowest score, the end states reaching it, and predecessors of every state."""
    best = {(start, _EAST): 0}
    predecessors = defaultdict(list)
    heap = [(0, start, _EAST)]
    lowest = None
    finals = []
    while heap:
        cost, position, heading = heapq.heappop(heap)
        if cost > best[(position, heading)]:
            continue
        if position == end:
            if lowest is not None and cost > lowest:
                break
            lowest = cost
            finals.append((position, heading))
            continue
        for new_heading, (d_row, d_col) in enumerate(_OFFSETS):
            if new_heading == (heading + 2) % len(_OFFSETS):
                continue
            following = (position[0] + d_row, position[1] + d_col)
            if following not in open_cells:
                continue
            new_cost = cost + _STEP_COST + (_TURN_COST if new_heading != heading else 0)
            state = (following, new_heading)
            known = best.get(state)
            if known is not None and new_cost > known:
                continue
            if known is None or new_cost < known:
                best[state] = new_cost
                predecessors[state] = []
                heapq.heappush(heap, (new_cost, following, new_heading))
            predecessors[state].append((position, heading))
    if lowest is None:
        raise ValueError("the end cannot be reached from the start")
    return lowest, finals, predecessors


def part1(text):
    """Lowest score a reindeer can get walking from S to E."""
    lowest, _, _ = _best_paths(*_parse(text))
    return lowest


def part2(text):
    """Number of tiles that lie on at least one best path."""
    _, finals, predecessors = _best_paths(*_parse(text))
    seen = set(finals)
    stack = list(finals)
    while stack:
        state = stack.pop()
        for previous in predecessors.get(state, ()):
            if previous not in seen:
                seen.add(previous)
                stack.append(previous)
    return len({position for position, _ in seen})