"""Day 2: Cube Conundrum."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

BAG = {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True, slots=True)
class Game:
    game_id: int
    draws: tuple[dict[str, int], ...]

    @classmethod
    def parse(cls, line: str) -> Game:
        header, sep, body = line.partition(":")
        label, _, raw_id = header.strip().partition(" ")
        if not sep or label != "Game" or not raw_id.isdigit():
            raise MalformedInputError(f"expected 'Game ID: draws', got {line!r}")
        draws = tuple(_parse_draw(draw) for draw in body.split(";"))
        return cls(game_id=int(raw_id), draws=draws)

    def possible_with(self, bag: dict[str, int]) -> bool:
        return all(
            count <= bag.get(color, 0)
            for draw in self.draws
            for color, count in draw.items()
        )

    def power(self) -> int:
        minimum: dict[str, int] = {}
        for draw in self.draws:
            for color, count in draw.items():
                minimum[color] = max(count, minimum.get(color, 0))
        return prod(minimum.values())


def _parse_draw(draw: str) -> dict[str, int]:
    cubes: dict[str, int] = {}
    for combo in draw.split(","):
        raw_count, _, color = combo.strip().partition(" ")
        if not raw_count.isdigit() or not color:
            raise MalformedInputError(f"expected '<count> <color>', got {combo!r}")
        cubes[color] = int(raw_count)
    return cubes


def part_01(stream: IO[str] | None) -> int:
    games = [Game.parse(line) for line in read_lines(stream)]
    return sum(game.game_id for game in games if game.possible_with(BAG))


def part_02(stream: IO[str] | None) -> int:
    return sum(Game.parse(line).power() for line in read_lines(stream))
