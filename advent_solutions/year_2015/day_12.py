"""Day 12: JSAbacusFramework.io."""

from __future__ import annotations

import json
from typing import IO, Any

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text


def sum_numbers(value: Any, *, skip_red: bool = False) -> int:
    """Sum every integer in a decoded JSON document.

    With `skip_red`, objects having any property whose value is "red" are
    ignored together with all of their children.
    """

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, list):
        return sum(sum_numbers(item, skip_red=skip_red) for item in value)
    if isinstance(value, dict):
        if skip_red and "red" in value.values():
            return 0
        return sum(sum_numbers(item, skip_red=skip_red) for item in value.values())
    return 0


def _document(stream: IO[str] | None) -> Any:
    try:
        return json.loads(read_text(stream))
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"input is not valid JSON: {exc}") from exc


def part_01(stream: IO[str] | None) -> int:
    return sum_numbers(_document(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum_numbers(_document(stream), skip_red=True)
