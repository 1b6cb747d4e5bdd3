"""Day 9: All in a Single Night."""

from __future__ import annotations

import re
from itertools import permutations
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

_EDGE_RE = re.compile(r"^(?P<src>\w+) to (?P<dst>\w+) = (?P<distance>\d+)$")


def parse_distances(lines: list[str]) -> dict[frozenset[str], int]:
    distances: dict[frozenset[str], int] = {}
    for line in lines:
        match = _EDGE_RE.match(line.strip())
        if match is None:
            raise MalformedInputError(f"unrecognized route: {line!r}")
        distances[frozenset((match["src"], match["dst"]))] = int(match["distance"])
    return distances


def route_lengths(distances: dict[frozenset[str], int]) -> list[int]:
    """Lengths of every route that visits each location exactly once."""

    cities = sorted({city for pair in distances for city in pair})
    if not cities:
        raise MalformedInputError("no routes in input")
    lengths = []
    for route in permutations(cities):
        legs = [frozenset(leg) for leg in zip(route, route[1:])]
        if all(leg in distances for leg in legs):
            lengths.append(sum(distances[leg] for leg in legs))
    if not lengths:
        raise MalformedInputError("no route visits every location")
    return lengths


def part_01(stream: IO[str] | None) -> int:
    return min(route_lengths(parse_distances(read_lines(stream))))


def part_02(stream: IO[str] | None) -> int:
    return max(route_lengths(parse_distances(read_lines(stream))))
