"""Day 8: Matchsticks."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines


def memory_length(literal: str) -> int:
    """Number of characters a double-quoted string literal decodes to."""

    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise MalformedInputError(f"not a quoted string literal: {literal!r}")
    body = literal[1:-1]
    length = 0
    index = 0
    while index < len(body):
        if body[index] == "\\":
            index += 4 if body[index + 1 : index + 2] == "x" else 2
        else:
            index += 1
        length += 1
    return length


def encoded_length(literal: str) -> int:
    return len(literal) + literal.count('"') + literal.count("\\") + 2


def part_01(stream: IO[str] | None) -> int:
    return sum(len(line) - memory_length(line) for line in read_lines(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum(encoded_length(line) - len(line) for line in read_lines(stream))
