"""Day 11: Corporate Policy."""

from __future__ import annotations

import string
from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_text

# Current password used when no input file is present.
DEFAULT_PASSWORD = "hepxcrrq"

_FORBIDDEN = frozenset("iol")


def has_straight(password: str) -> bool:
    return any(
        ord(a) + 1 == ord(b) and ord(b) + 1 == ord(c)
        for a, b, c in zip(password, password[1:], password[2:])
    )


def has_two_pairs(password: str) -> bool:
    pairs = {a for a, b in zip(password, password[1:]) if a == b}
    return len(pairs) >= 2


def is_valid(password: str) -> bool:
    return (
        not _FORBIDDEN.intersection(password)
        and has_straight(password)
        and has_two_pairs(password)
    )


def _increment(letters: list[str]) -> None:
    index = len(letters) - 1
    while index >= 0:
        if letters[index] != "z":
            letters[index] = chr(ord(letters[index]) + 1)
            return
        letters[index] = "a"
        index -= 1


def _skip_forbidden(letters: list[str]) -> None:
    """Bump the first forbidden letter and reset everything after it."""

    for index, letter in enumerate(letters):
        if letter in _FORBIDDEN:
            letters[index] = chr(ord(letter) + 1)
            letters[index + 1 :] = ["a"] * (len(letters) - index - 1)
            return


def next_valid_password(current: str) -> str:
    letters = list(current)
    while True:
        _increment(letters)
        _skip_forbidden(letters)
        candidate = "".join(letters)
        if is_valid(candidate):
            return candidate


def _current_password(stream: IO[str] | None) -> str:
    if stream is None:
        return DEFAULT_PASSWORD
    password = read_text(stream)
    if not password or any(ch not in string.ascii_lowercase for ch in password):
        raise MalformedInputError(
            f"password must be lowercase letters, got {password!r}"
        )
    return password


def part_01(stream: IO[str] | None) -> str:
    return next_valid_password(_current_password(stream))


def part_02(stream: IO[str] | None) -> str:
    return next_valid_password(part_01(stream))
