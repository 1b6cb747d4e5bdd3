from __future__ import annotations

import argparse
import json
from typing import Any

from advent_solutions.cli.common import (
    add_common_arguments,
    configure_logging,
    load_settings,
    parse_puzzle_id,
)
from advent_solutions.errors import ConfigurationError
from advent_solutions.years import get_year, list_years, year_status


def _format_year(status: dict[str, Any]) -> list[str]:
    lines = [
        f"{status['year']}: {status['days_solved']}/{status['max_day']} days solved"
    ]
    for day in range(1, status["max_day"] + 1):
        parts = status["days"].get(str(day))
        if not parts:
            marks = "- -"
        else:
            marks = " ".join("*" if part in parts else "-" for part in (1, 2))
        lines.append(f"  day {day:2d}  {marks}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="advent status", description="Show which days have solutions."
    )
    parser.add_argument("year", nargs="?", help="Only report this year.")
    parser.add_argument("--json", action="store_true", help="Print JSON.")
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    load_settings(args)

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
        statuses = [year_status(year) for year in years]
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid registry: {exc}") from exc

    if args.json:
        print(json.dumps({"years": statuses}, indent=2))
        return 0
    for status in statuses:
        print("\n".join(_format_year(status)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
