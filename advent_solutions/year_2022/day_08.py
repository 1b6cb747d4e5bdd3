"""Day 8: Treetop Tree House."""

from __future__ import annotations

from typing import IO, Iterator

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

Grid = list[list[int]]


def parse_forest(lines: list[str]) -> Grid:
    rows = [line.strip() for line in lines]
    if not rows or any(not row.isdigit() or len(row) != len(rows[0]) for row in rows):
        raise MalformedInputError("forest must be a rectangle of digits")
    return [[int(height) for height in row] for row in rows]


def _sight_lines(grid: Grid, row: int, col: int) -> Iterator[list[int]]:
    """Heights seen from a tree looking up, down, left and right."""

    column = [line[col] for line in grid]
    yield column[:row][::-1]
    yield column[row + 1 :]
    yield grid[row][:col][::-1]
    yield grid[row][col + 1 :]


def count_visible(grid: Grid) -> int:
    return sum(
        any(all(other < height for other in line) for line in _sight_lines(grid, r, c))
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
    )


def viewing_distance(height: int, line: list[int]) -> int:
    for distance, other in enumerate(line, start=1):
        if other >= height:
            return distance
    return len(line)


def best_scenic_score(grid: Grid) -> int:
    best = 0
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            score = 1
            for line in _sight_lines(grid, r, c):
                score *= viewing_distance(height, line)
            best = max(best, score)
    return best


def part_01(stream: IO[str] | None) -> int:
    return count_visible(parse_forest(read_lines(stream)))


def part_02(stream: IO[str] | None) -> int:
    return best_scenic_score(parse_forest(read_lines(stream)))
