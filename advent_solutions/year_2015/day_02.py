"""Day 2: I Was Told There Would Be No Math."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines


def wrapping_requirements(line: str) -> tuple[int, int]:
    """Return (paper area, ribbon length) for a `LxWxH` box."""

    try:
        small, medium, large = sorted(int(dim) for dim in line.strip().split("x"))
    except ValueError as exc:
        raise MalformedInputError(f"invalid box dimensions: {line!r}") from exc
    paper = (
        2 * (small * medium + medium * large + large * small) + small * medium
    )
    ribbon = 2 * (small + medium) + small * medium * large
    return paper, ribbon


def part_01(stream: IO[str] | None) -> int:
    return sum(wrapping_requirements(line)[0] for line in read_lines(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum(wrapping_requirements(line)[1] for line in read_lines(stream))
