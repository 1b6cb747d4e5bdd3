"""Day 10: Elves Look, Elves Say."""

from __future__ import annotations

from itertools import groupby
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text

# Starting sequence used when no input file is present.
DEFAULT_SEED = "3113322113"


def look_and_say(sequence: str) -> str:
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(sequence))


def expanded_length(seed: str, rounds: int) -> int:
    sequence = seed
    for _ in range(rounds):
        sequence = look_and_say(sequence)
    return len(sequence)


def _seed(stream: IO[str] | None) -> str:
    if stream is None:
        return DEFAULT_SEED
    seed = read_text(stream)
    if not seed.isdigit():
        raise MalformedInputError(f"seed must be a digit sequence, got {seed!r}")
    return seed


def part_01(stream: IO[str] | None) -> int:
    return expanded_length(_seed(stream), 40)


def part_02(stream: IO[str] | None) -> int:
    return expanded_length(_seed(stream), 50)
