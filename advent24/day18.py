"""Day 18: falling bytes in the memory space."""

from collections import deque

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _coordinates(text, size):
    coords = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"expected 'x,y' in {line!r}")
        point = (int(x), int(y))
        if not all(0 <= value < size for value in point):
            raise ValueError(f"byte {line!r} lies outside the {size}x{size} grid")
        coords.append(point)
    return coords


def _shortest(size, walls):
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    start = (0, 0)
    goal = (size - 1, size - 1)
    distance = {start: 0}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == goal:
            return distance[position]
        for d_x, d_y in _STEPS:
            following = (position[0] + d_x, position[1] + d_y)
            if (
                0 <= following[0] < size
                and 0 <= following[1] < size
                and following not in walls
                and following not in distance
            ):
                distance[following] = distance[position] + 1
                queue.append(following)
    return None


def part1(text, size=71, count=1024):
    """Minimum steps to the exit once the first bytes have fallen."""
    coords = _coordinates(text, size)
    steps = _shortest(size, set(coords[:count]))
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text, size=71, count=1024):
    """Coordinates 'x,y' of the first byte after the given count that cuts off the exit."""
    coords = _coordinates(text, size)
    low, high = count + 1, len(coords)
    if low > high or _shortest(size, set(coords[:high])) is not None:
        raise ValueError("no byte cuts off the exit")
    while low < high:
        middle = (low + high) // 2
        if _shortest(size, set(coords[:middle])) is None:
            high = middle
        else:
            low = middle + 1
    x, y = coords[low - 1]
    return f"{x},{y}"