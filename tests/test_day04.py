import pytest

from aoc24.solutions.day04 import part_one, part_two

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_part_one():
    assert part_one(EXAMPLE) == 18


def test_part_two():
    assert part_two(EXAMPLE) == 9


@pytest.mark.parametrize("text", ["XMAS", "SAMX", "X\nM\nA\nS", "X...\n.M..\n..A.\n...S"])
def test_single_occurrence(text):
    assert part_one(text) == 1


def test_no_occurrence():
    assert part_one("XMAX\nSSSS") == 0


def test_single_cross():
    assert part_two("M.S\n.A.\nM.S") == 1


def test_cross_needs_both_diagonals():
    assert part_two("M.M\n.A.\nM.S") == 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")