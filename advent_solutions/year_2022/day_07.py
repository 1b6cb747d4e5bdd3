"""Day 7: No Space Left On Device."""

from __future__ import annotations

from typing import IO

from advent_solutions.errors import MalformedInputError
from advent_solutions.inputs import read_lines

DISK_SIZE = 70_000_000
SPACE_NEEDED = 30_000_000
SMALL_DIRECTORY = 100_000


def directory_sizes(lines: list[str]) -> dict[tuple[str, ...], int]:
    """Total size of every directory seen in a terminal session.

    Directories are keyed by their path from the root, `()` being `/`.
    """

    cwd: list[str] = []
    sizes: dict[tuple[str, ...], int] = {(): 0}
    for line in lines:
        parts = line.split()
        if parts[:2] == ["$", "cd"] and len(parts) == 3:
            target = parts[2]
            if target == "/":
                cwd.clear()
            elif target == "..":
                if not cwd:
                    raise MalformedInputError("cd .. above the root directory")
                cwd.pop()
            else:
                cwd.append(target)
            sizes.setdefault(tuple(cwd), 0)
        elif parts == ["$", "ls"] or (len(parts) == 2 and parts[0] == "dir"):
            continue
        elif len(parts) == 2 and parts[0].isdigit():
            # A file counts towards every directory above it.
            for depth in range(len(cwd) + 1):
                path = tuple(cwd[:depth])
                sizes[path] = sizes.get(path, 0) + int(parts[0])
        else:
            raise MalformedInputError(f"unrecognized terminal line: {line!r}")
    return sizes


def sum_small_directories(sizes: dict[tuple[str, ...], int]) -> int:
    return sum(size for size in sizes.values() if size <= SMALL_DIRECTORY)


def smallest_to_delete(sizes: dict[tuple[str, ...], int]) -> int:
    """Size of the smallest directory whose removal frees enough space."""

    needed = SPACE_NEEDED - (DISK_SIZE - sizes[()])
    if needed <= 0:
        return 0
    return min(size for size in sizes.values() if size >= needed)


def part_01(stream: IO[str] | None) -> int:
    return sum_small_directories(directory_sizes(read_lines(stream)))


def part_02(stream: IO[str] | None) -> int:
    return smallest_to_delete(directory_sizes(read_lines(stream)))
