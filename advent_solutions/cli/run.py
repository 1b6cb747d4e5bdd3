from __future__ import annotations

import argparse
import json

from advent_solutions.cli.common import (
    add_common_arguments,
    configure_logging,
    load_settings,
    parse_puzzle_id,
    print_error,
)
from advent_solutions.errors import ConfigurationError, HandlerError
from advent_solutions.inputs import open_input
from advent_solutions.years import dispatch


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="advent run", description="Run one day/part solution."
    )
    parser.add_argument("puzzle", help="Puzzle id as YEAR-DAY-PART, e.g. 2015-1-2.")
    parser.add_argument(
        "--json", action="store_true", help="Print the outcome as a JSON object."
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        year, day, part = parse_puzzle_id(args.puzzle)
    except ValueError as exc:
        parser.error(str(exc))
    if day is None or part is None:
        parser.error("puzzle id must include a day and a part, e.g. 2015-1-2")

    _, data_dir = load_settings(args)
    try:
        with open_input(year, day, data_dir) as stream:
            outcome = dispatch(year, day, part, stream)
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid registry for {year}: {exc}") from exc
    except HandlerError as exc:
        print_error(f"{exc.origin} failed: {exc.message}")
        return 1

    if not outcome.implemented:
        print_error(f"No solution exists for day {day} part {part} of {year}")
        return 1
    if args.json:
        print(json.dumps(outcome.to_dict(), indent=2, default=str))
    else:
        print(outcome.result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
