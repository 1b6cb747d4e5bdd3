"""Day 6: Tuning Trouble."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text


def marker_end(data: str, length: int) -> int | None:
    """Position just past the first run of `length` distinct characters."""

    for end in range(length, len(data) + 1):
        if len(set(data[end - length : end])) == length:
            return end
    return None


def _find_marker(stream: IO[str] | None, length: int, what: str) -> int:
    position = marker_end(read_text(stream), length)
    if position is None:
        raise MalformedInputError(f"datastream has no {what} marker")
    return position


def part_01(stream: IO[str] | None) -> int:
    return _find_marker(stream, 4, "start-of-packet")


def part_02(stream: IO[str] | None) -> int:
    return _find_marker(stream, 14, "start-of-message")
