"""Day 5: Doesn't He Have Intern-Elves For This?"""

from __future__ import annotations

from typing import IO

from advent_solutions.inputs import read_lines

VOWELS = frozenset("aeiou")
FORBIDDEN_PAIRS = ("ab", "cd", "pq", "xy")


def is_nice(text: str) -> bool:
    if any(pair in text for pair in FORBIDDEN_PAIRS):
        return False
    vowel_count = sum(1 for char in text if char in VOWELS)
    has_double = any(left == right for left, right in zip(text, text[1:]))
    return vowel_count >= 3 and has_double


def is_nicer(text: str) -> bool:
    repeated_pair = any(text[i : i + 2] in text[i + 2 :] for i in range(len(text) - 1))
    sandwich = any(text[i] == text[i + 2] for i in range(len(text) - 2))
    return repeated_pair and sandwich


def part_01(stream: IO[str] | None) -> int:
    return sum(1 for line in read_lines(stream) if is_nice(line))


def part_02(stream: IO[str] | None) -> int:
    return sum(1 for line in read_lines(stream) if is_nicer(line))
