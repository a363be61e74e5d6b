import pytest

from aoc24.solutions.day08 import part_one, part_two

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

T_EXAMPLE = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
..........
"""


def test_part_one():
    assert part_one(EXAMPLE) == 14


def test_part_two():
    assert part_two(EXAMPLE) == 34


def test_part_two_t_frequency():
    assert part_two(T_EXAMPLE) == 9


def test_single_antenna_has_no_antinodes():
    text = "....\n.a..\n....\n"
    assert part_one(text) == 0
    assert part_two(text) == 0


def test_pair_in_a_row():
    text = ".aa.\n"
    assert part_one(text) == 2
    assert part_two(text) == 4


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")