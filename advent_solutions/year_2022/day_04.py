"""Day 4: Camp Cleanup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines


@dataclass(frozen=True, slots=True)
class SectionRange:
    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> SectionRange:
        start, sep, end = text.partition("-")
        if not sep:
            raise MalformedInputError(f"not a section range: {text!r}")
        try:
            return cls(int(start), int(end))
        except ValueError as exc:
            raise MalformedInputError(f"not a section range: {text!r}") from exc

    def contains(self, other: SectionRange) -> bool:
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: SectionRange) -> bool:
        return self.start <= other.end and other.start <= self.end


def parse_pair(line: str) -> tuple[SectionRange, SectionRange]:
    left, sep, right = line.strip().partition(",")
    if not sep:
        raise MalformedInputError(f"expected two comma separated ranges: {line!r}")
    return SectionRange.parse(left), SectionRange.parse(right)


def part_01(stream: IO[str] | None) -> int:
    pairs = [parse_pair(line) for line in read_lines(stream)]
    return sum(
        1 for left, right in pairs if left.contains(right) or right.contains(left)
    )


def part_02(stream: IO[str] | None) -> int:
    pairs = [parse_pair(line) for line in read_lines(stream)]
    return sum(1 for left, right in pairs if left.overlaps(right))
