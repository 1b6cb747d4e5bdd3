"""Day 5: Supply Stacks.

The input is a drawing of crate stacks, a blank line, then the moves. The
CrateMover 9000 moves crates one at a time; the 9001 moves a whole batch at
once and keeps its order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

_MOVE_RE = re.compile(r"^move (?P<count>\d+) from (?P<src>\d+) to (?P<dst>\d+)$")


@dataclass(frozen=True, slots=True)
class Move:
    count: int
    source: int
    target: int

    @classmethod
    def parse(cls, line: str) -> Move:
        match = _MOVE_RE.match(line.strip())
        if match is None:
            raise MalformedInputError(f"unrecognized move: {line!r}")
        move = cls(int(match["count"]), int(match["src"]) - 1, int(match["dst"]) - 1)
        if move.count == 0 or move.source == move.target:
            raise MalformedInputError(f"move does nothing: {line!r}")
        return move


def parse_stacks(drawing: list[str]) -> list[list[str]]:
    """Stacks listed bottom to top, from a drawing ending in the label row."""

    if not drawing:
        raise MalformedInputError("missing stack drawing")
    *rows, labels = drawing
    stacks: list[list[str]] = [[] for _ in labels.split()]
    for row in reversed(rows):
        for index, column in enumerate(range(1, len(row), 4)):
            crate = row[column]
            if crate == " ":
                continue
            if index >= len(stacks):
                raise MalformedInputError(f"crate outside labelled stacks: {row!r}")
            stacks[index].append(crate)
    return stacks


def parse_plan(lines: list[str]) -> tuple[list[list[str]], list[Move]]:
    split = next((index for index, line in enumerate(lines) if not line.strip()), None)
    if split is None:
        raise MalformedInputError("no blank line after the stack drawing")
    moves = [Move.parse(line) for line in lines[split + 1 :] if line.strip()]
    return parse_stacks(lines[:split]), moves


def rearrange(
    stacks: list[list[str]], moves: list[Move], *, keep_order: bool
) -> str:
    """Apply the moves and return the crate on top of each stack."""

    for move in moves:
        if max(move.source, move.target) >= len(stacks):
            raise MalformedInputError(f"no such stack in {move}")
        source = stacks[move.source]
        if move.count > len(source):
            raise MalformedInputError(f"not enough crates for {move}")
        batch = source[-move.count :]
        del source[-move.count :]
        stacks[move.target].extend(batch if keep_order else reversed(batch))
    return "".join(stack[-1] for stack in stacks if stack)


def part_01(stream: IO[str] | None) -> str:
    stacks, moves = parse_plan(read_lines(stream, keep_blank=True))
    return rearrange(stacks, moves, keep_order=False)


def part_02(stream: IO[str] | None) -> str:
    stacks, moves = parse_plan(read_lines(stream, keep_blank=True))
    return rearrange(stacks, moves, keep_order=True)
