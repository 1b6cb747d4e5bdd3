"""Day 2: Rock Paper Scissors."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

OPPONENT = "ABC"
RESPONSE = "XYZ"


def _parse_round(line: str) -> tuple[int, int]:
    parts = line.split()
    if (
        len(parts) != 2
        or len(parts[0]) != 1
        or len(parts[1]) != 1
        or parts[0] not in OPPONENT
        or parts[1] not in RESPONSE
    ):
        raise MalformedInputError(f"invalid strategy line: {line!r}")
    return OPPONENT.index(parts[0]), RESPONSE.index(parts[1])


def _score(opponent: int, shape: int) -> int:
    # outcome: 0 = loss, 1 = draw, 2 = win
    outcome = (shape - opponent + 1) % 3
    return shape + 1 + 3 * outcome


def score_as_shapes(line: str) -> int:
    """Second column is the shape to play."""

    opponent, shape = _parse_round(line)
    return _score(opponent, shape)


def score_as_outcomes(line: str) -> int:
    """Second column is the required outcome (lose, draw, win)."""

    opponent, outcome = _parse_round(line)
    shape = (opponent + outcome - 1) % 3
    return _score(opponent, shape)


def part_01(stream: IO[str] | None) -> int:
    return sum(score_as_shapes(line) for line in read_lines(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum(score_as_outcomes(line) for line in read_lines(stream))
