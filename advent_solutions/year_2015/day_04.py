"""Day 4: The Ideal Stocking Stuffer."""

from __future__ import annotations

import hashlib
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text

# Secret key used when no input file is present.
DEFAULT_SECRET_KEY = "ckczppom"


def mine(secret_key: str, zeros: int) -> int:
    """Lowest positive number whose md5 with the key starts with `zeros` zeros."""

    prefix = "0" * zeros
    number = 0
    while True:
        number += 1
        digest = hashlib.md5(f"{secret_key}{number}".encode()).hexdigest()
        if digest.startswith(prefix):
            return number


def _secret_key(stream: IO[str] | None) -> str:
    if stream is None:
        return DEFAULT_SECRET_KEY
    key = read_text(stream)
    if not key:
        raise MalformedInputError("secret key is empty")
    return key


def part_01(stream: IO[str] | None) -> int:
    return mine(_secret_key(stream), 5)


def part_02(stream: IO[str] | None) -> int:
    return mine(_secret_key(stream), 6)
