import pytest

from aoc24.solutions.day21 import part_one, part_two

EXAMPLE = "029A\n980A\n179A\n456A\n379A\n"


def test_part_one():
    assert part_one(EXAMPLE) == 126384


def test_part_one_single_codes():
    assert part_one("029A\n") == 68 * 29
    assert part_one("980A\n") == 60 * 980


def test_part_one_is_sum_of_codes():
    assert part_one(EXAMPLE) == sum(part_one(code) for code in EXAMPLE.splitlines())


def test_part_two_exceeds_part_one():
    assert part_two(EXAMPLE) > part_one(EXAMPLE)


def test_part_two_is_sum_of_codes():
    assert part_two(EXAMPLE) == sum(part_two(code) for code in EXAMPLE.splitlines())


def test_unknown_key_rejected():
    with pytest.raises(ValueError):
        part_one("0B9A\n")