"""Day 1: Calorie Counting."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines


def calories_per_elf(lines: list[str]) -> list[int]:
    """Total the blank-line separated item lists, one total per elf."""

    totals: list[int] = []
    current: int | None = None
    for line in lines:
        if not line.strip():
            if current is not None:
                totals.append(current)
            current = None
            continue
        try:
            calories = int(line)
        except ValueError as exc:
            raise MalformedInputError(
                f"expected a calorie count, got {line!r}"
            ) from exc
        current = calories if current is None else current + calories
    if current is not None:
        totals.append(current)
    return totals


def _totals(stream: IO[str] | None) -> list[int]:
    totals = calories_per_elf(read_lines(stream, keep_blank=True))
    if not totals:
        raise MalformedInputError("no elves in input")
    return totals


def part_01(stream: IO[str] | None) -> int:
    return max(_totals(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum(sorted(_totals(stream), reverse=True)[:3])
