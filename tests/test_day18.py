import pytest

from aoc24.solutions.day18 import part_one, part_one_bfs, part_two

EXAMPLE = """6
12
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_part_one_bfs():
    assert part_one_bfs(EXAMPLE) == 22


def test_part_one():
    assert part_one(EXAMPLE) == 22


def test_part_two():
    assert part_two(EXAMPLE) == "6,1"


def test_open_grid_distance():
    assert part_one("1\n0\n") == 2
    assert part_one_bfs("1\n0\n") == 2


def test_blocked_grid_has_no_path():
    blocked = "1\n2\n1,0\n0,1\n"
    assert part_one(blocked) is None
    assert part_one_bfs(blocked) is None


def test_part_two_without_blocking_byte_raises():
    with pytest.raises(ValueError):
        part_two("2\n0\n1,1\n2,1\n")


def test_coordinate_outside_grid_raises():
    with pytest.raises(ValueError):
        part_one("1\n1\n5,5\n")