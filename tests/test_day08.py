from advent24.day08 import part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def _transpose(text):
    lines = text.splitlines()
    return "\n".join("".join(column) for column in zip(*lines))


def test_example_part1():
    assert part1(EXAMPLE) == 14


def test_example_part2():
    assert part2(EXAMPLE) == 34


def test_lone_antennas_make_no_antinodes():
    text = "a...\n..b.\n....\n.c..\n"
    assert part1(text) == part2(text) == 0


def test_part2_at_least_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_paired_antennas_are_their_own_antinodes():
    antenna_count = sum(char not in ".\n" for char in EXAMPLE)
    assert part2(EXAMPLE) >= antenna_count


def test_transposition_invariant():
    assert part1(_transpose(EXAMPLE)) == part1(EXAMPLE)
    assert part2(_transpose(EXAMPLE)) == part2(EXAMPLE)


def test_crlf_line_endings():
    assert part1(EXAMPLE.replace("\n", "\r\n")) == part1(EXAMPLE)
    assert part2(EXAMPLE.replace("\n", "\r\n")) == part2(EXAMPLE)