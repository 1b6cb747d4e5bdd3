"""Day 1: Not Quite Lisp."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text


def walk_floors(instructions: str) -> tuple[int, int | None]:
    """Return the final floor and the 1-based step that first enters the basement."""

    floor = 0
    first_basement: int | None = None
    for step, char in enumerate(instructions, start=1):
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
        if floor == -1 and first_basement is None:
            first_basement = step
    return floor, first_basement


def part_01(stream: IO[str] | None) -> int:
    end_floor, _ = walk_floors(read_text(stream))
    return end_floor


def part_02(stream: IO[str] | None) -> int:
    _, first_basement = walk_floors(read_text(stream))
    if first_basement is None:
        raise MalformedInputError("instructions never enter the basement")
    return first_basement
