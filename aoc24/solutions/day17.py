"""Day 17: a three-bit computer and the input that makes it print itself."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from aoc24.runner import solution_main

DAY = 17

REG_A = 0
REG_B = 1
REG_C = 2

_MAX_STEPS = 1_000_000
_SEARCH_SPAN = 10_000_000

_PROGRAM_TEXT = re.compile(
    r"Register A: ([0-9]+)\nRegister B: ([0-9]+)\nRegister C: ([0-9]+)\n\n"
    r"Program: ([0-9]+(?:,[0-9]+)*)\s*"
)


def _divide(value: int, shift: int) -> int:
    """Divide by 2**shift, truncating toward zero."""
    if shift < 0:
        raise ValueError(f"negative shift: {shift}")
    return value >> shift if value >= 0 else -((-value) >> shift)


def _rem8(value: int) -> int:
    """Remainder of division by 8 with the sign of the dividend."""
    rem = abs(value) % 8
    return rem if value >= 0 else -rem


@dataclass(frozen=True)
class State:
    """Registers and instruction pointer at one moment."""

    registers: tuple[int, int, int]
    ip: int


class IntCodeVm:
    """Three registers, a program of three-bit numbers and an output list."""

    def __init__(self, registers: Iterable[int], program: Iterable[int]) -> None:
        self.registers = list(registers)
        if len(self.registers) != 3:
            raise ValueError("expected exactly three registers")
        self.ip = 0
        self.program = list(program)
        self.output: list[int] = []

    @classmethod
    def parse(cls, text: str) -> IntCodeVm:
        match = _PROGRAM_TEXT.fullmatch(text)
        if match is None:
            raise ValueError("malformed program description")
        a, b, c, program = match.groups()
        return cls([int(a), int(b), int(c)], [int(v) for v in program.split(",")])

    def copy(self) -> IntCodeVm:
        vm = IntCodeVm(self.registers, self.program)
        vm.ip = self.ip
        vm.output = list(self.output)
        return vm

    @property
    def halted(self) -> bool:
        return self.ip >= len(self.program)

    def run(self) -> None:
        while not self.halted:
            self.run_step()

    def _raw_operand(self) -> int:
        index = self.ip + 1
        if index >= len(self.program):
            raise ValueError(f"missing operand at IP {self.ip}")
        return self.program[index]

    def _combo_operand(self) -> int:
        raw = self._raw_operand()
        if 0 <= raw <= 3:
            return raw
        if raw == 4:
            return self.registers[REG_A]
        if raw == 5:
            return self.registers[REG_B]
        if raw == 6:
            return self.registers[REG_C]
        raise ValueError(f"Invalid operand at IP {self.ip}: {raw}")

    def run_step(self) -> None:
        instruction = self.program[self.ip]
        regs = self.registers
        if instruction == 0:  # adv
            regs[REG_A] = _divide(regs[REG_A], self._combo_operand())
        elif instruction == 1:  # bxl
            regs[REG_B] ^= self._raw_operand()
        elif instruction == 2:  # bst
            regs[REG_B] = _rem8(self._combo_operand())
        elif instruction == 3:  # jnz
            if regs[REG_A] != 0:
                self.ip = self._raw_operand()
                return
        elif instruction == 4:  # bxc
            regs[REG_B] ^= regs[REG_C]
        elif instruction == 5:  # out
            self.output.append(_rem8(self._combo_operand()))
        elif instruction == 6:  # bdv
            regs[REG_B] = _divide(regs[REG_A], self._combo_operand())
        elif instruction == 7:  # cdv
            regs[REG_C] = _divide(regs[REG_A], self._combo_operand())
        else:
            raise ValueError(f"Invalid opcode at IP {self.ip}: {instruction}")
        self.ip += 2

    def state(self) -> State:
        a, b, c = self.registers
        return State(registers=(a, b, c), ip=self.ip)


def part_one(text: str) -> str:
    vm = IntCodeVm.parse(text)
    vm.run()
    return ",".join(str(value) for value in vm.output)


def _trial_output(template: IntCodeVm, a: int) -> list[int] | None:
    """Run with register A set; None when the output outgrows the program."""
    vm = template.copy()
    vm.registers[REG_A] = a
    steps = 0
    while True:
        if len(vm.output) > len(vm.program):
            return None
        steps += 1
        if steps > _MAX_STEPS:
            raise RuntimeError(f"Exceeded max_steps {_MAX_STEPS}")
        if vm.halted:
            return vm.output
        vm.run_step()


def part_two(text: str) -> int:
    template = IntCodeVm.parse(text)
    program = template.program
    start = 0
    last_result = 0
    for length in range(1, len(program) + 1):
        to_find = program[len(program) - length:]
        for a in range(start, start + _SEARCH_SPAN):
            output = _trial_output(template, a)
            if output is None:
                break
            if output and output[-len(to_find):] == to_find:
                print(f"{a} => {output}")
                last_result = a
                start = (a % 8 ** len(to_find)) * 8
                break
        else:
            raise RuntimeError(f"No valid input found for {start} {to_find}")
    return last_result


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)