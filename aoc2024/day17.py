"""Chronospatial Computer: a three-bit machine and a quine search."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .file_io import lines_from_file


def _unique_match(text: str, pattern: str) -> str:
    match = re.search(pattern, text)
    if match is None:
        raise ValueError(f"Pattern {pattern!r} should match.")
    return match.group(1)


def _parse_program(program_string: str) -> list[int]:
    return [int(value) for value in program_string.split(",")]


@dataclass
class Computer:
    """Registers, program and instruction pointer of the machine."""

    program: list[int]
    a: int = 0
    b: int = 0
    c: int = 0
    instruction_ptr: int = 0

    @classmethod
    def parse(cls, text: str) -> Computer:
        """Read registers and program from the puzzle's text format."""
        return cls(
            program=_parse_program(_unique_match(text, r"Program: (.*)")),
            a=int(_unique_match(text, r"Register A: (.*)")),
            b=int(_unique_match(text, r"Register B: (.*)")),
            c=int(_unique_match(text, r"Register C: (.*)")),
        )

    @classmethod
    def from_program(cls, program_string: str) -> Computer:
        """A computer with all registers zero running the comma-separated program."""
        return cls(_parse_program(program_string))

    def __str__(self) -> str:
        program = "".join(str(value) for value in self.program)
        pointer = " " * self.instruction_ptr + "^"
        return f"A: {self.a}, B: {self.b}, C: {self.c}\n{program}\n{pointer} "

    @property
    def halted(self) -> bool:
        return self.instruction_ptr > len(self.program) - 2

    def combo(self, operand: int) -> int:
        if operand < 4:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError("Combo value reserved - invalid program.")

    def step(self) -> int | None:
        """Execute one instruction; return its output, if it produced one."""
        if self.halted:
            return None
        opcode = self.program[self.instruction_ptr]
        operand = self.program[self.instruction_ptr + 1]
        self.instruction_ptr += 2

        if opcode == 0:
            self.a >>= self.combo(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo(operand) % 8
        elif opcode == 3:
            if self.a != 0:
                self.instruction_ptr = operand
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            return self.combo(operand) % 8
        elif opcode == 6:
            self.b = self.a >> self.combo(operand)
        elif opcode == 7:
            self.c = self.a >> self.combo(operand)
        else:
            raise ValueError("Invalid instruction - bad program.")
        return None

    def run(self) -> str:
        """Run until halted and return the outputs joined by commas."""
        outputs = []
        while not self.halted:
            output = self.step()
            if output is not None:
                outputs.append(output)
        return ",".join(str(output) for output in outputs)


def reverse_engineer_a(
    program_string: str, intended_output: Sequence[int], fixed_a: int = 0
) -> int | None:
    """Find register A, three bits at a time, making the program print intended_output."""
    if not intended_output:
        return fixed_a
    last_out = intended_output[-1]

    for low_bits in range(8):
        new_a = (fixed_a << 3) + low_bits
        if new_a == 0:
            continue
        computer = Computer.from_program(program_string)
        computer.a = new_a
        while not computer.halted:
            output = computer.step()
            if output is None:
                continue
            if output == last_out:
                total_a = reverse_engineer_a(
                    program_string, intended_output[:-1], new_a
                )
                if total_a is not None:
                    return total_a
            break
    return None


def _load_program(path: str) -> Computer:
    return Computer.parse("\n".join(lines_from_file(path)))


def part1(path: str) -> str:
    return _load_program(path).run()


def part2(path: str) -> int | None:
    program = _load_program(path).program
    program_string = ",".join(str(value) for value in program)
    return reverse_engineer_a(program_string, program, 0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 17.")
    parser.add_argument("path", nargs="?", default="input/input17.txt")
    args = parser.parse_args(argv)
    print("Answer to part 1:")
    print(part1(args.path))
    print("Answer to part 2:")
    answer = part2(args.path)
    print(answer if answer is not None else 0)