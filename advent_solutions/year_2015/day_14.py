"""Day 14: Reindeer Olympics."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

RACE_SECONDS = 2503

_LINE_RE = re.compile(
    r"^(?P<name>\w+) can fly (?P<speed>\d+) km/s for (?P<fly>\d+) seconds?, "
    r"but then must rest for (?P<rest>\d+) seconds?\.$"
)


@dataclass(frozen=True, slots=True)
class Reindeer:
    name: str
    speed: int
    fly_time: int
    rest_time: int

    @classmethod
    def from_line(cls, line: str) -> Reindeer:
        match = _LINE_RE.match(line.strip())
        if match is None:
            raise MalformedInputError(f"unrecognized reindeer: {line!r}")
        return cls(
            name=match["name"],
            speed=int(match["speed"]),
            fly_time=int(match["fly"]),
            rest_time=int(match["rest"]),
        )

    def traveled(self, seconds: int) -> int:
        full_cycles, remainder = divmod(seconds, self.fly_time + self.rest_time)
        flying = full_cycles * self.fly_time + min(remainder, self.fly_time)
        return flying * self.speed


def winning_distance(herd: list[Reindeer], seconds: int) -> int:
    return max(reindeer.traveled(seconds) for reindeer in herd)


def winning_points(herd: list[Reindeer], seconds: int) -> int:
    """Each second, every reindeer in the lead scores a point."""

    points = [0] * len(herd)
    for second in range(1, seconds + 1):
        distances = [reindeer.traveled(second) for reindeer in herd]
        lead = max(distances)
        for index, distance in enumerate(distances):
            if distance == lead:
                points[index] += 1
    return max(points)


def _herd(stream: IO[str] | None) -> list[Reindeer]:
    herd = [Reindeer.from_line(line) for line in read_lines(stream)]
    if not herd:
        raise MalformedInputError("no reindeer in input")
    return herd


def part_01(stream: IO[str] | None) -> int:
    return winning_distance(_herd(stream), RACE_SECONDS)


def part_02(stream: IO[str] | None) -> int:
    return winning_points(_herd(stream), RACE_SECONDS)
