"""Day 16: Aunt Sue."""

from __future__ import annotations

import operator
import re
from typing import IO, Callable

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

# What the MFCSAM detected on the gift.
TICKER_TAPE = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}

# The outdated retroencabulator reports ranges for some compounds.
RANGED_READINGS: dict[str, Callable[[int, int], bool]] = {
    "cats": operator.gt,
    "trees": operator.gt,
    "pomeranians": operator.lt,
    "goldfish": operator.lt,
}

_AUNT_RE = re.compile(r"^Sue (?P<number>\d+): (?P<things>.+)$")


def parse_aunt(line: str) -> tuple[int, dict[str, int]]:
    match = _AUNT_RE.match(line.strip())
    if match is None:
        raise MalformedInputError(f"unrecognized aunt: {line!r}")
    things: dict[str, int] = {}
    for item in match["things"].split(", "):
        name, sep, count = item.partition(": ")
        if not sep or not count.isdigit() or name not in TICKER_TAPE:
            raise MalformedInputError(f"unrecognized compound {item!r} in {line!r}")
        things[name] = int(count)
    return int(match["number"]), things


def matches_exactly(things: dict[str, int]) -> bool:
    return all(TICKER_TAPE[name] == count for name, count in things.items())


def matches_ranges(things: dict[str, int]) -> bool:
    return all(
        RANGED_READINGS.get(name, operator.eq)(count, TICKER_TAPE[name])
        for name, count in things.items()
    )


def find_aunt(lines: list[str], matches: Callable[[dict[str, int]], bool]) -> int:
    for line in lines:
        number, things = parse_aunt(line)
        if matches(things):
            return number
    raise MalformedInputError("no aunt matches the ticker tape")


def part_01(stream: IO[str] | None) -> int:
    return find_aunt(read_lines(stream), matches_exactly)


def part_02(stream: IO[str] | None) -> int:
    return find_aunt(read_lines(stream), matches_ranges)
