"""Day 3: Perfectly Spherical Houses in a Vacuum."""

from __future__ import annotations

from typing import IO, Iterable

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text

MOVES: dict[str, tuple[int, int]] = {
    ">": (1, 0),
    "<": (-1, 0),
    "^": (0, 1),
    "v": (0, -1),
}


def _route(directions: Iterable[str]) -> set[tuple[int, int]]:
    x, y = 0, 0
    visited = {(x, y)}
    for direction in directions:
        try:
            dx, dy = MOVES[direction]
        except KeyError as exc:
            raise MalformedInputError(f"unknown direction: {direction!r}") from exc
        x, y = x + dx, y + dy
        visited.add((x, y))
    return visited


def visit_houses(directions: str) -> int:
    return len(_route(directions))


def visit_houses_split(directions: str) -> int:
    """Santa and Robo-Santa take turns following the directions."""

    return len(_route(directions[0::2]) | _route(directions[1::2]))


def part_01(stream: IO[str] | None) -> int:
    return visit_houses(read_text(stream))


def part_02(stream: IO[str] | None) -> int:
    return visit_houses_split(read_text(stream))
