import pytest

from advent24.day06 import part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_lone_guard_visits_only_start():
    assert part1("^") == 1


def test_straight_corridor():
    column = ".\n.\n.\n^\n"
    assert part1(column) == len(column.split())
    assert part2(column) == part2("^")


def test_crlf_line_endings():
    crlf = EXAMPLE.replace("\n", "\r\n")
    assert part1(crlf) == part1(EXAMPLE)
    assert part2(crlf) == part2(EXAMPLE)


def test_loop_count_bounded_by_route():
    assert part2(EXAMPLE) <= part1(EXAMPLE) - 1


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part1("....\n.#..\n")
    with pytest.raises(ValueError):
        part2("....\n.#..\n")