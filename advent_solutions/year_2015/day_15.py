"""Day 15: Science for Hungry People."""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import prod
from typing import IO, Iterator

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

TEASPOONS = 100
CALORIE_TARGET = 500

PROPERTIES = ("capacity", "durability", "flavor", "texture")

_PROPERTY_RE = re.compile(r"(\w+) (-?\d+)")


@dataclass(frozen=True, slots=True)
class Ingredient:
    name: str
    properties: tuple[int, ...]
    calories: int

    @classmethod
    def parse(cls, line: str) -> Ingredient:
        name, sep, rest = line.strip().partition(": ")
        values = {key: int(value) for key, value in _PROPERTY_RE.findall(rest)}
        missing = [key for key in (*PROPERTIES, "calories") if key not in values]
        if not sep or missing:
            raise MalformedInputError(f"unrecognized ingredient: {line!r}")
        return cls(
            name=name,
            properties=tuple(values[key] for key in PROPERTIES),
            calories=values["calories"],
        )


def _mixtures(total: int, kinds: int) -> Iterator[tuple[int, ...]]:
    """Every way to split `total` teaspoons across `kinds` ingredients."""

    if kinds == 1:
        yield (total,)
        return
    for amount in range(total + 1):
        for rest in _mixtures(total - amount, kinds - 1):
            yield (amount, *rest)


def score(ingredients: list[Ingredient], amounts: tuple[int, ...]) -> int:
    totals = (
        sum(
            amount * ingredient.properties[index]
            for ingredient, amount in zip(ingredients, amounts)
        )
        for index in range(len(PROPERTIES))
    )
    return prod(max(0, total) for total in totals)


def calories(ingredients: list[Ingredient], amounts: tuple[int, ...]) -> int:
    return sum(
        amount * ingredient.calories for ingredient, amount in zip(ingredients, amounts)
    )


def highest_score(
    ingredients: list[Ingredient],
    teaspoons: int = TEASPOONS,
    *,
    calorie_target: int | None = None,
) -> int:
    if not ingredients:
        raise MalformedInputError("no ingredients in input")
    return max(
        (
            score(ingredients, amounts)
            for amounts in _mixtures(teaspoons, len(ingredients))
            if calorie_target is None
            or calories(ingredients, amounts) == calorie_target
        ),
        default=0,
    )


def part_01(stream: IO[str] | None) -> int:
    return highest_score([Ingredient.parse(line) for line in read_lines(stream)])


def part_02(stream: IO[str] | None) -> int:
    return highest_score(
        [Ingredient.parse(line) for line in read_lines(stream)],
        calorie_target=CALORIE_TARGET,
    )
