from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any

from advent_solutions.cli.common import (
    add_common_arguments,
    add_progress_argument,
    configure_logging,
    load_settings,
    parse_puzzle_id,
    resolve_progress_settings,
)
from advent_solutions.cli.progress import build_progress_reporter
from advent_solutions.errors import ConfigurationError, HandlerError
from advent_solutions.inputs import open_input
from advent_solutions.registry import YearRegistry
from advent_solutions.years import get_registry, get_year, list_years


def _planned_parts(registries: list[YearRegistry]) -> list[tuple[int, int, int]]:
    return [
        (registry.year, entry.day, part)
        for registry in registries
        for entry in registry.days()
        for part in entry.parts()
    ]


def _failure(
    year: int, day: int, part: int, exc: Exception, message: str
) -> dict[str, Any]:
    return {
        "year": year,
        "day": day,
        "part": part,
        "error": message,
        "error_type": type(exc).__name__,
    }


def run_all(
    registries: list[YearRegistry],
    data_dir: str | Path,
    *,
    progress_enabled: bool = False,
    progress_explicit: bool = False,
) -> dict[str, Any]:
    planned = _planned_parts(registries)
    by_year = {registry.year: registry for registry in registries}
    reporter = build_progress_reporter(
        enabled=progress_enabled,
        total_parts=len(planned),
        explicit_request=progress_explicit,
    )
    results: list[dict[str, Any]] = []
    failures: list[dict[str, Any]] = []
    try:
        for year, day, part in planned:
            label = f"{year}-{day}-{part}"
            started = time.perf_counter()
            try:
                with open_input(year, day, data_dir) as stream:
                    outcome = by_year[year].dispatch(day, part, stream)
            except HandlerError as exc:
                failures.append(_failure(year, day, part, exc, exc.message))
                reporter.on_part_complete(label, failed=True)
                continue
            except OSError as exc:
                # Input path exists but cannot be read as a file.
                failures.append(_failure(year, day, part, exc, str(exc)))
                reporter.on_part_complete(label, failed=True)
                continue
            entry = outcome.to_dict()
            entry["elapsed_s"] = round(time.perf_counter() - started, 6)
            results.append(entry)
            reporter.on_part_complete(label, failed=False)
    finally:
        reporter.close()

    return {
        "years": {
            str(registry.year): registry.solved_count() for registry in registries
        },
        "results": results,
        "failures": failures,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="advent run-all",
        description="Run every implemented solution and summarize the results."
    )
    parser.add_argument("year", nargs="?", help="Only run this year.")
    add_common_arguments(parser)
    add_progress_argument(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    config, data_dir = load_settings(args)

    if args.year:
        try:
            year, _, _ = parse_puzzle_id(args.year)
        except ValueError as exc:
            parser.error(str(exc))
        try:
            get_year(year)
        except KeyError as exc:
            raise SystemExit(f"No solutions found for the year {year}") from exc
        years = [year]
    else:
        years = list_years()

    try:
        registries = [get_registry(year) for year in years]
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid registry: {exc}") from exc

    progress_enabled, progress_explicit = resolve_progress_settings(args, config)
    summary = run_all(
        registries,
        data_dir,
        progress_enabled=progress_enabled,
        progress_explicit=progress_explicit,
    )
    print(json.dumps(summary, indent=2, default=str))
    return 1 if summary["failures"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
