"""Day 1: Trebuchet?!"""

from __future__ import annotations

from typing import IO

from advent_solutions.inputs import read_lines

NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _calibration(digits: list[int]) -> int:
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def calibration_numerals(line: str) -> int:
    return _calibration([int(char) for char in line if char.isdigit()])


def calibration_numbers(line: str) -> int:
    """Like `calibration_numerals`, but spelled-out digits count too.

    Words may overlap ("eightwo" holds both 8 and 2).
    """

    digits: list[int] = []
    for index, char in enumerate(line):
        if char.isdigit():
            digits.append(int(char))
            continue
        for word, value in NUMBER_WORDS.items():
            if line.startswith(word, index):
                digits.append(value)
                break
    return _calibration(digits)


def part_01(stream: IO[str] | None) -> int:
    return sum(calibration_numerals(line) for line in read_lines(stream))


def part_02(stream: IO[str] | None) -> int:
    return sum(calibration_numbers(line) for line in read_lines(stream))
