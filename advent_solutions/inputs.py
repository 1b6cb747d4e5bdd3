from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import IO, Iterator

from advent_solutions.errors import MissingInputError

DEFAULT_DATA_DIR = "data"
DATA_DIR_ENV = "ADVENT_DATA_DIR"

logger = logging.getLogger("advent_solutions.inputs")


def resolve_data_dir(
    explicit: str | None = None, configured: str | None = None
) -> Path:
    """Pick the input directory: flag, then environment, then config."""

    if explicit:
        return Path(explicit)
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return Path(configured or DEFAULT_DATA_DIR)


def input_path(year: int, day: int, data_dir: str | Path = DEFAULT_DATA_DIR) -> Path:
    return Path(data_dir) / f"{year}-{day:02d}.txt"


@contextlib.contextmanager
def open_input(
    year: int, day: int, data_dir: str | Path = DEFAULT_DATA_DIR
) -> Iterator[IO[str] | None]:
    """Yield an open text stream for the day's input, or None if there is none.

    A file that exists but is empty still yields a stream (positioned at EOF);
    only a missing file yields None. The stream is closed on exit.
    """

    path = input_path(year, day, data_dir)
    try:
        stream = path.open("r", encoding="utf-8")
    except FileNotFoundError:
        logger.debug({"evt": "input_missing", "path": str(path)})
        yield None
        return
    with stream:
        yield stream


def require_input(stream: IO[str] | None) -> IO[str]:
    if stream is None:
        raise MissingInputError()
    return stream


def read_text(stream: IO[str] | None) -> str:
    return require_input(stream).read().strip()


def read_lines(stream: IO[str] | None, *, keep_blank: bool = False) -> list[str]:
    lines = [line.rstrip("\r\n") for line in require_input(stream)]
    if keep_blank:
        return lines
    return [line for line in lines if line.strip()]
