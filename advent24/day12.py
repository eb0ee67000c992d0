"""Day 12: fencing garden regions."""

_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _regions(text):
    """Yield each connected set of cells growing the same plant."""
    plots = {
        (row, col): plant
        for row, line in enumerate(text.splitlines())
        for col, plant in enumerate(line)
    }
    seen = set()
    for cell, plant in plots.items():
        if cell in seen:
            continue
        region = {cell}
        stack = [cell]
        while stack:
            row, col = stack.pop()
            for d_row, d_col in _STEPS:
                neighbour = (row + d_row, col + d_col)
                if neighbour not in region and plots.get(neighbour) == plant:
                    region.add(neighbour)
                    stack.append(neighbour)
        seen |= region
        yield region


def _perimeter(region):
    return sum(
        (row + d_row, col + d_col) not in region
        for row, col in region
        for d_row, d_col in _STEPS
    )


def _sides(region):
    """Number of straight fence sides, counted as the region's corners."""
    corners = 0
    for row, col in region:
        for d_row, d_col in _DIAGONALS:
            vertical = (row + d_row, col) in region
            horizontal = (row, col + d_col) in region
            diagonal = (row + d_row, col + d_col) in region
            if not vertical and not horizontal:
                corners += 1
            elif vertical and horizontal and not diagonal:
                corners += 1
    return corners


def part1(text):
    """Total price: area times perimeter for each region."""
    return sum(len(region) * _perimeter(region) for region in _regions(text))


def part2(text):
    """Discounted price: area times number of sides for each region."""
    return sum(len(region) * _sides(region) for region in _regions(text))