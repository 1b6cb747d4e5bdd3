"""Day 13: Knights of the Dinner Table."""

from __future__ import annotations

import re
from itertools import permutations
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

HOST = "me"

_LINE_RE = re.compile(
    r"^(?P<guest>\w+) would (?P<sign>gain|lose) (?P<units>\d+) happiness units? "
    r"by sitting next to (?P<neighbor>\w+)\.$"
)


def parse_happiness(lines: list[str]) -> dict[tuple[str, str], int]:
    happiness: dict[tuple[str, str], int] = {}
    for line in lines:
        match = _LINE_RE.match(line.strip())
        if match is None:
            raise MalformedInputError(f"unrecognized seating rule: {line!r}")
        units = int(match["units"])
        happiness[match["guest"], match["neighbor"]] = (
            units if match["sign"] == "gain" else -units
        )
    return happiness


def _table_total(
    happiness: dict[tuple[str, str], int], table: tuple[str, ...]
) -> int:
    return sum(
        happiness.get((guest, neighbor), 0) + happiness.get((neighbor, guest), 0)
        for guest, neighbor in zip(table, table[1:] + table[:1])
    )


def best_seating(happiness: dict[tuple[str, str], int]) -> int:
    """Best total change in happiness around a circular table."""

    guests = sorted({guest for pair in happiness for guest in pair})
    if not guests:
        raise MalformedInputError("no guests in input")
    # Rotations are equivalent, so pin the first guest.
    first, rest = guests[0], guests[1:]
    return max(
        _table_total(happiness, (first, *order)) for order in permutations(rest)
    )


def part_01(stream: IO[str] | None) -> int:
    return best_seating(parse_happiness(read_lines(stream)))


def part_02(stream: IO[str] | None) -> int:
    happiness = parse_happiness(read_lines(stream))
    guests = {guest for pair in happiness for guest in pair}
    for guest in guests:
        happiness[guest, HOST] = 0
        happiness[HOST, guest] = 0
    return best_seating(happiness)
