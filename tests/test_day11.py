import pytest

from aoc24.solutions.day11 import _count_stones, part_one, part_two


def test_part_one():
    assert part_one("125 17") == 55312


def test_part_one_with_trailing_newline():
    assert part_one("125 17\n") == 55312


def test_part_two():
    assert part_two("125 17") == 65601038650482


def test_six_blinks_of_example():
    assert _count_stones(125, 6) + _count_stones(17, 6) == 22


def test_single_blink_rules():
    assert _count_stones(0, 1) == 1
    assert _count_stones(10, 1) == 2
    assert _count_stones(1, 1) == 1


def test_zero_steps_keeps_one_stone():
    assert _count_stones(123456, 0) == 1


def test_non_numeric_stone_raises():
    with pytest.raises(ValueError):
        part_one("12 x")