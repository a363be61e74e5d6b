import pytest

from aoc24.solutions.day09 import part_one, part_two

EXAMPLE = "2333133121414131402"


def test_part_one():
    assert part_one(EXAMPLE) == 1928


def test_part_two():
    assert part_two(EXAMPLE) == 2858


def test_trailing_newline_is_ignored():
    assert part_one(EXAMPLE + "\n") == 1928
    assert part_two(EXAMPLE + "\n") == 2858


def test_single_file_has_zero_checksum():
    assert part_one("5") == 0
    assert part_two("5") == 0


def test_part_two_never_exceeds_part_one_bound():
    # Whole-file moves cannot pack files tighter than block moves.
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


@pytest.mark.parametrize("bad", ["", "12a3", "12 3"])
def test_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        part_one(bad)
    with pytest.raises(ValueError):
        part_two(bad)