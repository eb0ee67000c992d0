"""Day 20: cheating through walls on a race track."""

from collections import deque

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _parse(text):
    track = set()
    start = end = None
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char == "#":
                continue
            track.add((row, col))
            if char == "S":
                start = (row, col)
            elif char == "E":
                end = (row, col)
    if start is None:
        raise ValueError("no start 'S' found on the track")
    if end is None:
        raise ValueError("no end 'E' found on the track")
    return track, start, end


def _distances(track, origin):
    distance = {origin: 0}
    queue = deque([origin])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in _STEPS:
            following = (row + d_row, col + d_col)
            if following in track and following not in distance:
                distance[following] = distance[(row, col)] + 1
                queue.append(following)
    return distance


def _cheats(text, radius, threshold):
    """Cheats of 2 to radius picoseconds that save at least threshold."""
    track, start, end = _parse(text)
    from_start = _distances(track, start)
    if end not in from_start:
        raise ValueError("the end cannot be reached from the start")
    to_end = _distances(track, end)
    total = from_start[end]
    offsets = [
        (d_row, d_col, abs(d_row) + abs(d_col))
        for d_row in range(-radius, radius + 1)
        for d_col in range(abs(d_row) - radius, radius - abs(d_row) + 1)
        if abs(d_row) + abs(d_col) >= 2
    ]
    count = 0
    for (row, col), elapsed in from_start.items():
        for d_row, d_col, length in offsets:
            remaining = to_end.get((row + d_row, col + d_col))
            if remaining is not None and total - (elapsed + length + remaining) >= threshold:
                count += 1
    return count


def part1(text, threshold=100):
    """Cheats of at most two picoseconds saving at least threshold."""
    return _cheats(text, 2, threshold)


def part2(text, threshold=100):
    """Cheats of at most twenty picoseconds saving at least threshold."""
    return _cheats(text, 20, threshold)