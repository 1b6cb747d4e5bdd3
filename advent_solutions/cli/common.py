from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any

from advent_solutions.config import normalize_years_config, resolve_config
from advent_solutions.inputs import resolve_data_dir
from advent_solutions.years import apply_year_overrides

_PUZZLE_ID_RE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d))?)?$")


def parse_puzzle_id(raw: str) -> tuple[int, int | None, int | None]:
    """Parse `YEAR`, `YEAR-DAY` or `YEAR-DAY-PART`."""

    match = _PUZZLE_ID_RE.match(raw.strip())
    if match is None:
        raise ValueError(
            f"puzzle id must look like YEAR-DAY-PART (e.g. 2015-1-2), got {raw!r}"
        )
    year, day, part = match.groups()
    return (
        int(year),
        None if day is None else int(day),
        None if part is None else int(part),
    )


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", help="Path to JSON config (data_dir, years, progress)."
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help=(
            "Directory holding YEAR-DD.txt input files "
            "(default from $ADVENT_DATA_DIR, config, or ./data)."
        ),
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log registry discovery and dispatch."
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_settings(args: argparse.Namespace) -> tuple[dict[str, Any], Path]:
    """Resolve config, register configured year bounds and pick the data dir."""

    try:
        config = resolve_config(args.config)
        year_overrides = normalize_years_config(config.get("years"))
        apply_year_overrides(year_overrides)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        raise SystemExit(f"Invalid config: {exc}") from exc
    data_dir = resolve_data_dir(args.data_dir, config.get("data_dir"))
    return config, data_dir


def print_error(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def add_progress_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show a progress bar while solving. Defaults to enabled on TTY stderr.",
    )


def resolve_progress_settings(
    args: argparse.Namespace,
    config: dict[str, Any],
) -> tuple[bool, bool]:
    progress_arg = getattr(args, "progress", None)
    if progress_arg is not None:
        return bool(progress_arg), True
    if "progress" in config:
        return bool(config.get("progress")), True
    return bool(sys.stderr.isatty()), False
