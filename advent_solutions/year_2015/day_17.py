"""Day 17: No Such Thing as Too Much."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

EGGNOG_LITERS = 150


def container_combinations(target: int, sizes: list[int]) -> tuple[int, int]:
    """Return (all combinations, combinations using the fewest containers).

    `ways[k][v]` counts the subsets of k containers holding exactly v liters.
    """

    ways = [[0] * (target + 1) for _ in range(len(sizes) + 1)]
    ways[0][0] = 1
    for size in sizes:
        for count in range(len(sizes), 0, -1):
            for volume in range(target, size - 1, -1):
                ways[count][volume] += ways[count - 1][volume - size]

    by_count = [row[target] for row in ways]
    fewest = next((found for found in by_count if found), 0)
    return sum(by_count), fewest


def _sizes(stream: IO[str] | None) -> list[int]:
    sizes = []
    for line in read_lines(stream):
        try:
            sizes.append(int(line))
        except ValueError as exc:
            raise MalformedInputError(
                f"expected a container size, got {line!r}"
            ) from exc
    if any(size <= 0 for size in sizes):
        raise MalformedInputError("container sizes must be positive")
    return sizes


def part_01(stream: IO[str] | None) -> int:
    return container_combinations(EGGNOG_LITERS, _sizes(stream))[0]


def part_02(stream: IO[str] | None) -> int:
    return container_combinations(EGGNOG_LITERS, _sizes(stream))[1]
