"""Day 7: Some Assembly Required.

Each line connects a gate (or a plain signal) to a named wire. Signals are
16-bit, so NOT and LSHIFT are masked to 0..65535.
"""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

MASK = 0xFFFF

_BINARY_GATES = {
    "AND": lambda left, right: left & right,
    "OR": lambda left, right: left | right,
    "LSHIFT": lambda left, right: (left << right) & MASK,
    "RSHIFT": lambda left, right: left >> right,
}


def parse_circuit(lines: list[str]) -> dict[str, tuple[str, ...]]:
    """Map each wire to its source expression, split into tokens."""

    circuit: dict[str, tuple[str, ...]] = {}
    for line in lines:
        expression, sep, wire = line.partition(" -> ")
        tokens = tuple(expression.split())
        valid = (
            len(tokens) == 1
            or (len(tokens) == 2 and tokens[0] == "NOT")
            or (len(tokens) == 3 and tokens[1] in _BINARY_GATES)
        )
        if not sep or not wire.strip() or not valid:
            raise MalformedInputError(f"unrecognized connection: {line!r}")
        circuit[wire.strip()] = tokens
    return circuit


def _operands(tokens: tuple[str, ...]) -> list[str]:
    if len(tokens) == 1:
        return [tokens[0]]
    if len(tokens) == 2:
        return [tokens[1]]
    return [tokens[0], tokens[2]]


def signal(circuit: dict[str, tuple[str, ...]], wire: str) -> int:
    values: dict[str, int] = {}

    def lookup(operand: str) -> int:
        if operand.isdigit():
            return int(operand)
        return values[operand]

    # Wire chains can be hundreds deep, so evaluate with an explicit stack.
    pending = [wire]
    visiting: set[str] = set()
    while pending:
        current = pending[-1]
        if current in values:
            pending.pop()
            continue
        if current not in circuit:
            raise MalformedInputError(f"wire {current!r} has no source")
        tokens = circuit[current]
        missing = [
            operand
            for operand in _operands(tokens)
            if not operand.isdigit() and operand not in values
        ]
        if missing:
            if current in visiting:
                raise MalformedInputError(f"wire {current!r} depends on itself")
            visiting.add(current)
            pending.extend(missing)
            continue

        if len(tokens) == 1:
            value = lookup(tokens[0])
        elif len(tokens) == 2:
            value = ~lookup(tokens[1]) & MASK
        else:
            value = _BINARY_GATES[tokens[1]](lookup(tokens[0]), lookup(tokens[2]))
        values[current] = value
        visiting.discard(current)
        pending.pop()
    return values[wire]


def part_01(stream: IO[str] | None) -> int:
    return signal(parse_circuit(read_lines(stream)), "a")


def part_02(stream: IO[str] | None) -> int:
    circuit = parse_circuit(read_lines(stream))
    overridden = dict(circuit)
    overridden["b"] = (str(signal(circuit, "a")),)
    return signal(overridden, "a")
