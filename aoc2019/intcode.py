"""A minimal Intcode machine supporting addition, multiplication and halt."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

DEFAULT_INPUT = "data/input_day2a.txt"
DEFAULT_TARGET = 19690720
INSTRUCTION_WIDTH = 4


class IntcodeError(Exception):
    """Raised when an Intcode program cannot be decoded or run."""


class OpKind(enum.Enum):
    ADD = 1
    MULTIPLY = 2
    HALT = 99


@dataclass(frozen=True)
class Operation:
    kind: OpKind
    lhs: int | None = None
    rhs: int | None = None
    dest: int | None = None

    @classmethod
    def parse(cls, memory: Sequence[int]) -> Operation:
        """Decode the operation at the start of ``memory``."""
        if not memory:
            raise IntcodeError("Empty operation slice")
        opcode = memory[0]
        if opcode in (OpKind.ADD.value, OpKind.MULTIPLY.value):
            if len(memory) < INSTRUCTION_WIDTH:
                raise IntcodeError(
                    f"Incomplete operation for opcode {opcode}: {list(memory)}"
                )
            lhs, rhs, dest = memory[1:INSTRUCTION_WIDTH]
            return cls(OpKind(opcode), lhs, rhs, dest)
        if opcode == OpKind.HALT.value:
            return cls(OpKind.HALT)
        raise IntcodeError(f"Unknown opcode: {opcode}")

    def execute(self, memory: list[int]) -> None:
        """Apply the operation to ``memory`` in place."""
        if self.kind is OpKind.HALT:
            return
        for address in (self.lhs, self.rhs, self.dest):
            if not 0 <= address < len(memory):
                raise IntcodeError(f"Address {address} out of range")
        if self.kind is OpKind.ADD:
            memory[self.dest] = memory[self.lhs] + memory[self.rhs]
        else:
            memory[self.dest] = memory[self.lhs] * memory[self.rhs]


def parse_program(text: str) -> list[int]:
    """Parse a comma-separated list of unsigned integers."""
    program = []
    for field in text.rstrip().split(","):
        if not field.isascii() or not field.lstrip("+").isdigit() or field.count("+") > 1:
            raise ValueError(f"invalid program value: {field!r}")
        program.append(int(field))
    return program


def run(program: Sequence[int], noun: int, verb: int) -> list[int]:
    """Run a copy of ``program`` with the given noun and verb; return final memory."""
    memory = list(program)
    if len(memory) < 3:
        raise IntcodeError("Program too short to set noun and verb")
    memory[1] = noun
    memory[2] = verb
    index = 0
    while index < len(memory):
        op = Operation.parse(memory[index:index + INSTRUCTION_WIDTH])
        if op.kind is OpKind.HALT:
            break
        op.execute(memory)
        index += INSTRUCTION_WIDTH
    return memory


def find_noun_verb(program: Sequence[int], target: int = DEFAULT_TARGET) -> int:
    """Find the noun and verb producing ``target``; return ``100 * noun + verb``."""
    for noun in range(100):
        for verb in range(100):
            if run(program, noun, verb)[0] == target:
                return 100 * noun + verb
    raise IntcodeError("No solution found")


def solve_day2a(path: str | PathLike[str] = DEFAULT_INPUT) -> int:
    """Solve the noun/verb search for the program stored at ``path``."""
    with open(path, encoding="utf-8") as handle:
        program = parse_program(handle.read())
    return find_noun_verb(program)