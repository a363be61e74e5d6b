import pytest

from aoc24.solutions.day17 import IntCodeVm, State, part_one, part_two

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

EXAMPLE_QUINE = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""

EXAMPLE_SELF = """Register A: 117440
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_part_one():
    assert part_one(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_part_one_3():
    assert part_one(EXAMPLE_SELF) == "0,3,5,4,3,0"


def test_part_two():
    assert part_two(EXAMPLE_QUINE) == 117440


PROGRAMS = [
    ([0, 0, 0], [], [0, 0, 0], []),
    ([16, 0, 9], [0, 0], [16, 0, 9], []),
    ([16, 0, 9], [0, 1], [8, 0, 9], []),
    ([16, 0, 9], [0, 2], [4, 0, 9], []),
    ([15, 0, 9], [0, 2], [3, 0, 9], []),
    ([16, 0, 9], [0, 3], [2, 0, 9], []),
    ([8, 0, 9], [0, 3], [1, 0, 9], []),
    ([7, 0, 9], [0, 3], [0, 0, 9], []),
    ([1, 7, 3], [1, 0], [1, 7, 3], []),
    ([1, 7, 3], [1, 7], [1, 0, 3], []),
    ([1, 3, 3], [1, 12], [1, 15, 3], []),
    ([3, 4, 9], [2, 6], [3, 1, 9], []),
    ([3, 8, 9], [2, 5], [3, 0, 9], []),
    ([1, 8, 9], [3, 4, 5, 0, 5, 1], [1, 8, 9], [1]),
    ([0, 8, 9], [3, 4, 5, 0, 5, 1], [0, 8, 9], [0, 1]),
    ([1, 7, 0], [4, 0], [1, 7, 0], []),
    ([1, 7, 7], [4, 7], [1, 0, 7], []),
    ([1, 7, 3], [4, 12], [1, 4, 3], []),
    ([11, 22, 33], [5, 0], [11, 22, 33], [0]),
    ([11, 22, 33], [5, 1], [11, 22, 33], [1]),
    ([11, 22, 33], [5, 2], [11, 22, 33], [2]),
    ([11, 22, 33], [5, 3], [11, 22, 33], [3]),
    ([11, 22, 33], [5, 4], [11, 22, 33], [3]),
    ([11, 22, 33], [5, 5], [11, 22, 33], [6]),
    ([11, 22, 33], [5, 6], [11, 22, 33], [1]),
    ([16, 0, 9], [6, 0], [16, 16, 9], []),
    ([16, 0, 9], [6, 1], [16, 8, 9], []),
    ([16, 0, 9], [6, 2], [16, 4, 9], []),
    ([15, 0, 9], [6, 2], [15, 3, 9], []),
    ([16, 0, 9], [6, 3], [16, 2, 9], []),
    ([8, 0, 9], [6, 3], [8, 1, 9], []),
    ([7, 0, 9], [6, 3], [7, 0, 9], []),
    ([16, 0, 9], [7, 0], [16, 0, 16], []),
    ([16, 0, 9], [7, 1], [16, 0, 8], []),
    ([16, 0, 9], [7, 2], [16, 0, 4], []),
    ([15, 0, 9], [7, 2], [15, 0, 3], []),
    ([16, 0, 9], [7, 3], [16, 0, 2], []),
    ([8, 0, 9], [7, 3], [8, 0, 1], []),
    ([7, 0, 9], [7, 3], [7, 0, 0], []),
    ([11, 22, 33], [], [11, 22, 33], []),
    ([11, 22, 9], [2, 6], [11, 1, 9], []),
    ([10, 22, 33], [5, 0, 5, 1, 5, 4], [10, 22, 33], [0, 1, 2]),
    ([2024, 22, 33], [0, 1, 5, 4, 3, 0], [0, 22, 33], [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]),
    ([11, 29, 33], [1, 7], [11, 26, 33], []),
    ([11, 2024, 43690], [4, 0], [11, 44354, 43690], []),
]


@pytest.mark.parametrize("registers, program, expected_registers, expected_output", PROGRAMS)
def test_program(registers, program, expected_registers, expected_output):
    vm = IntCodeVm(registers, program)
    vm.run()
    assert vm.registers == expected_registers
    assert vm.output == expected_output


def test_parse_reads_registers_and_program():
    vm = IntCodeVm.parse(EXAMPLE)
    assert vm.registers == [729, 0, 0]
    assert vm.program == [0, 1, 5, 4, 3, 0]


def test_parse_rejects_malformed_text():
    with pytest.raises(ValueError):
        IntCodeVm.parse("Register A: x\n")


def test_invalid_opcode_raises():
    vm = IntCodeVm([0, 0, 0], [8, 0])
    with pytest.raises(ValueError):
        vm.run_step()


def test_invalid_combo_operand_raises():
    vm = IntCodeVm([0, 0, 0], [5, 7])
    with pytest.raises(ValueError):
        vm.run_step()


def test_state_after_run():
    vm = IntCodeVm([16, 0, 9], [0, 1])
    vm.run()
    assert vm.state() == State(registers=(8, 0, 9), ip=2)