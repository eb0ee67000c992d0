"""Day 6: the patrolling guard."""

_DIRECTIONS = "^>v<"
_OFFSETS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}


def _parse(text):
    grid = text.splitlines()
    for row, line in enumerate(grid):
        col = line.find("^")
        if col != -1:
            return grid, (row, col)
    raise ValueError("no guard '^' found in the map")


def _outside(grid, row, col):
    return row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row])


def _route(grid, start):
    """Cells the guard newly steps on, in order, excluding the start."""
    row, col = start
    heading = 0
    visited = {start}
    route = []
    while True:
        d_row, d_col = _OFFSETS[_DIRECTIONS[heading]]
        n_row, n_col = row + d_row, col + d_col
        if _outside(grid, n_row, n_col):
            return route
        if grid[n_row][n_col] == "#":
            heading = (heading + 1) % len(_DIRECTIONS)
            continue
        if (n_row, n_col) not in visited and grid[n_row][n_col] not in _DIRECTIONS:
            route.append((n_row, n_col))
        visited.add((n_row, n_col))
        row, col = n_row, n_col


def _loops(grid, start, obstacle):
    """Whether the guard walks in a cycle once an obstacle is added."""
    row, col = start
    heading = 0
    seen = {(row, col, heading)}
    while True:
        d_row, d_col = _OFFSETS[_DIRECTIONS[heading]]
        n_row, n_col = row + d_row, col + d_col
        if _outside(grid, n_row, n_col):
            return False
        if (n_row, n_col) == obstacle or grid[n_row][n_col] == "#":
            heading = (heading + 1) % len(_DIRECTIONS)
            continue
        if (n_row, n_col, heading) in seen:
            return True
        row, col = n_row, n_col
        seen.add((row, col, heading))


def part1(text):
    """Number of distinct cells the guard visits before leaving."""
    grid, start = _parse(text)
    return 1 + len(_route(grid, start))


def part2(text):
    """Number of single obstacle placements that trap the guard in a loop."""
    grid, start = _parse(text)
    return sum(_loops(grid, start, cell) for cell in _route(grid, start))