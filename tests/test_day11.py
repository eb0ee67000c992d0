import pytest

from advent24.day11 import count_stones, part1, part2


def test_example_six_blinks():
    assert count_stones([125, 17], 6) == 22


def test_example_part1():
    assert part1("125 17\n") == 55312


def test_part1_uses_25_blinks():
    assert part1("125 17") == count_stones([125, 17], 25)


def test_part2_uses_75_blinks():
    assert part2("0") == count_stones([0], 75)


def test_zero_blinks_keeps_count():
    assert count_stones([5, 6, 7, 8], 0) == 4


@pytest.mark.parametrize("blinks", [0, 3, 10])
def test_zero_becomes_one(blinks):
    assert count_stones([0], blinks + 1) == count_stones([1], blinks)


@pytest.mark.parametrize("blinks", [0, 3, 10])
def test_odd_digits_multiplied(blinks):
    assert count_stones([1], blinks + 1) == count_stones([2024], blinks)


@pytest.mark.parametrize("blinks", [0, 3, 10])
def test_even_digits_split(blinks):
    assert count_stones([2024], blinks + 1) == count_stones([20, 24], blinks)
    assert count_stones([1000], blinks + 1) == count_stones([10, 0], blinks)


def test_counts_add_across_stones():
    assert count_stones([125, 17], 20) == count_stones([125], 20) + count_stones([17], 20)