"""Day 15: a robot shoving boxes around a warehouse."""

_OFFSETS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_WIDE = {"#": "##", ".": "..", "O": "[]", "@": "@."}
_BOXES = "O[]"


def _parse(text, widen):
    lines = iter(text.splitlines())
    rows = []
    for line in lines:
        if len(line) <= 1:
            break
        rows.append("".join(_WIDE.get(char, "") for char in line) if widen else line)
    moves = [char for line in lines for char in line if char in _OFFSETS]
    grid = {
        (row, col): char
        for row, line in enumerate(rows)
        for col, char in enumerate(line)
    }
    robot = next((cell for cell, char in grid.items() if char == "@"), None)
    if robot is None:
        raise ValueError("no robot '@' found in the warehouse")
    return grid, robot, moves


def _push(grid, robot, step):
    """Move the robot and every box in its way; return the robot's new cell."""
    d_row, d_col = step
    seen = {robot}
    frontier = [robot]
    while frontier:
        row, col = frontier.pop()
        target = (row + d_row, col + d_col)
        char = grid.get(target, "#")
        if char == "#":
            return robot
        if char not in _BOXES:
            continue
        group = [target]
        if char == "[":
            group.append((target[0], target[1] + 1))
        elif char == "]":
            group.append((target[0], target[1] - 1))
        for cell in group:
            if cell not in seen:
                seen.add(cell)
                frontier.append(cell)
    contents = {cell: grid[cell] for cell in seen}
    for cell in seen:
        grid[cell] = "."
    for (row, col), char in contents.items():
        grid[(row + d_row, col + d_col)] = char
    return robot[0] + d_row, robot[1] + d_col


def _gps_total(text, widen, box):
    grid, robot, moves = _parse(text, widen)
    for move in moves:
        robot = _push(grid, robot, _OFFSETS[move])
    return sum(100 * row + col for (row, col), char in grid.items() if char == box)


def part1(text):
    """Sum of GPS coordinates of all boxes after the robot's moves."""
    return _gps_total(text, widen=False, box="O")


def part2(text):
    """Sum of GPS coordinates of the wide boxes in the doubled warehouse."""
    return _gps_total(text, widen=True, box="[")