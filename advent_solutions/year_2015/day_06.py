"""Day 6: Probably a Fire Hazard."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

GRID_SIZE = 1000

_INSTRUCTION_RE = re.compile(
    r"^(?P<action>turn on|turn off|toggle) (?P<x0>\d+),(?P<y0>\d+) "
    r"through (?P<x1>\d+),(?P<y1>\d+)$"
)


@dataclass(frozen=True, slots=True)
class Instruction:
    action: str
    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def parse(cls, line: str) -> Instruction:
        match = _INSTRUCTION_RE.match(line.strip())
        if match is None:
            raise MalformedInputError(f"unrecognized instruction: {line!r}")
        x0, y0, x1, y1 = (int(match[key]) for key in ("x0", "y0", "x1", "y1"))
        if x0 > x1 or y0 > y1 or max(x1, y1) >= GRID_SIZE:
            raise MalformedInputError(f"rectangle out of bounds: {line!r}")
        return cls(match["action"], x0, y0, x1, y1)


def count_lit(instructions: list[Instruction]) -> int:
    # One int bitmask per row; bit x is the light in column x.
    rows = [0] * GRID_SIZE
    for step in instructions:
        mask = ((1 << (step.x1 - step.x0 + 1)) - 1) << step.x0
        for y in range(step.y0, step.y1 + 1):
            if step.action == "turn on":
                rows[y] |= mask
            elif step.action == "turn off":
                rows[y] &= ~mask
            else:
                rows[y] ^= mask
    return sum(bin(row).count("1") for row in rows)


def total_brightness(instructions: list[Instruction]) -> int:
    rows = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for step in instructions:
        start, stop = step.x0, step.x1 + 1
        for y in range(step.y0, step.y1 + 1):
            row = rows[y]
            if step.action == "turn on":
                row[start:stop] = [level + 1 for level in row[start:stop]]
            elif step.action == "turn off":
                row[start:stop] = [max(0, level - 1) for level in row[start:stop]]
            else:
                row[start:stop] = [level + 2 for level in row[start:stop]]
    return sum(sum(row) for row in rows)


def part_01(stream: IO[str] | None) -> int:
    return count_lit([Instruction.parse(line) for line in read_lines(stream)])


def part_02(stream: IO[str] | None) -> int:
    return total_brightness([Instruction.parse(line) for line in read_lines(stream)])
