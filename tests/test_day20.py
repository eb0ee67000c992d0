import pytest

from advent24.day20 import part1, part2

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


def test_example_best_short_cheat():
    assert part1(EXAMPLE, threshold=64) == 1


def test_example_all_short_cheats():
    assert part1(EXAMPLE, threshold=2) == 44


def test_example_long_cheats():
    assert part2(EXAMPLE, threshold=76) == 3


@pytest.mark.parametrize("threshold", [2, 20, 40, 64])
def test_longer_cheats_find_at_least_as_many(threshold):
    assert part2(EXAMPLE, threshold) >= part1(EXAMPLE, threshold)


def test_higher_threshold_never_finds_more():
    counts = [part2(EXAMPLE, threshold) for threshold in (50, 60, 70, 76)]
    assert counts == sorted(counts, reverse=True)


def test_default_threshold_on_small_track_finds_nothing():
    assert part1(EXAMPLE) == part2(EXAMPLE) == 0


def test_missing_end_raises():
    with pytest.raises(ValueError):
        part1("#####\n#S..#\n#####\n")


def test_disconnected_track_raises():
    with pytest.raises(ValueError):
        part1("#######\n#S.#.E#\n#######\n")