"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

import string
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

GROUP_SIZE = 3


def priority(item: str) -> int:
    if item in string.ascii_lowercase:
        return ord(item) - ord("a") + 1
    if item in string.ascii_uppercase:
        return ord(item) - ord("A") + 27
    raise MalformedInputError(f"not a rucksack item: {item!r}")


def _only_common(groups: list[str], context: str) -> str:
    common = set(groups[0]).intersection(*groups[1:])
    if len(common) != 1:
        raise MalformedInputError(
            f"expected exactly one shared item, found {sorted(common)} in {context!r}"
        )
    return common.pop()


def misplaced_item(rucksack: str) -> str:
    half, odd = divmod(len(rucksack), 2)
    if odd or not half:
        raise MalformedInputError(f"compartments differ in size: {rucksack!r}")
    return _only_common([rucksack[:half], rucksack[half:]], rucksack)


def badge(rucksacks: list[str]) -> str:
    return _only_common(rucksacks, " / ".join(rucksacks))


def part_01(stream: IO[str] | None) -> int:
    return sum(priority(misplaced_item(line.strip())) for line in read_lines(stream))


def part_02(stream: IO[str] | None) -> int:
    rucksacks = [line.strip() for line in read_lines(stream)]
    if len(rucksacks) % GROUP_SIZE:
        raise MalformedInputError(
            f"{len(rucksacks)} rucksacks do not split into groups of {GROUP_SIZE}"
        )
    return sum(
        priority(badge(rucksacks[start : start + GROUP_SIZE]))
        for start in range(0, len(rucksacks), GROUP_SIZE)
    )
