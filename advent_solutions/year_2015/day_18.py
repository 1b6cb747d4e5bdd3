"""Day 18: Like a GIF For Your Yard."""

from __future__ import annotations

from collections import Counter
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

STEPS = 100

Light = tuple[int, int]


def parse_grid(lines: list[str]) -> tuple[set[Light], int]:
    """Return the lit lights and the side length of the square grid."""

    size = len(lines)
    lit: set[Light] = set()
    for y, line in enumerate(lines):
        row = line.strip()
        if len(row) != size or set(row) - {"#", "."}:
            raise MalformedInputError(
                f"row {y} is not part of a square grid: {line!r}"
            )
        lit.update((x, y) for x, cell in enumerate(row) if cell == "#")
    if size == 0:
        raise MalformedInputError("empty light grid")
    return lit, size


def _corners(size: int) -> set[Light]:
    edge = size - 1
    return {(0, 0), (0, edge), (edge, 0), (edge, edge)}


def step(lit: set[Light], size: int) -> set[Light]:
    neighbors = Counter(
        (x + dx, y + dy)
        for x, y in lit
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx or dy) and 0 <= x + dx < size and 0 <= y + dy < size
    )
    return {
        light
        for light, count in neighbors.items()
        if count == 3 or (count == 2 and light in lit)
    }


def animate(
    lit: set[Light], size: int, steps: int, *, stuck_corners: bool = False
) -> int:
    stuck = _corners(size) if stuck_corners else set()
    lit = lit | stuck
    for _ in range(steps):
        lit = step(lit, size) | stuck
    return len(lit)


def part_01(stream: IO[str] | None) -> int:
    lit, size = parse_grid(read_lines(stream))
    return animate(lit, size, STEPS)


def part_02(stream: IO[str] | None) -> int:
    lit, size = parse_grid(read_lines(stream))
    return animate(lit, size, STEPS, stuck_corners=True)
