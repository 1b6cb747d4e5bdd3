from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import IO, Any, Callable, Mapping, TypeAlias

from advent_solutions.errors import ConfigurationError, HandlerError

Handler: TypeAlias = Callable[[IO[str] | None], Any]

# Puzzle calendars run December 1st through 25th.
MAX_DAY = 25
PARTS: tuple[int, ...] = (1, 2)

logger = logging.getLogger("advent_solutions.registry")


@dataclass(frozen=True, slots=True)
class DaySolutions:
    """Handlers discovered for a single day; either part may be absent."""

    day: int
    part_01: Handler | None = None
    part_02: Handler | None = None

    def handler(self, part: int) -> Handler | None:
        if part == 1:
            return self.part_01
        if part == 2:
            return self.part_02
        return None

    def parts(self) -> tuple[int, ...]:
        return tuple(part for part in PARTS if self.handler(part) is not None)

    @property
    def solved(self) -> bool:
        return self.part_01 is not None or self.part_02 is not None


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Result of a dispatch request.

    `implemented` is False when no handler is registered for the requested
    day and part; `result` then stays None.
    """

    year: int | None
    day: int
    part: int
    implemented: bool
    result: Any = None

    @classmethod
    def not_implemented(cls, year: int | None, day: int, part: int) -> DispatchOutcome:
        return cls(year=year, day=day, part=part, implemented=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "day": self.day,
            "part": self.part,
            "implemented": self.implemented,
            "result": self.result,
        }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class YearRegistry:
    """Immutable (day, part) -> handler table for one year."""

    def __init__(
        self, year: int, max_day: int, days: Mapping[int, DaySolutions]
    ) -> None:
        validate_max_day(max_day)
        for day, entry in days.items():
            if not _is_int(day) or day < 1 or day > max_day:
                raise ConfigurationError(
                    f"day {day!r} is outside the declared range 1..{max_day} "
                    f"for {year}"
                )
            if entry.day != day:
                raise ConfigurationError(
                    f"solutions for day {entry.day} registered under day {day} "
                    f"for {year}"
                )
        self._year = year
        self._max_day = max_day
        self._days: dict[int, DaySolutions] = dict(days)
        self._solved_count = sum(1 for entry in self._days.values() if entry.solved)

    def __repr__(self) -> str:
        return (
            f"YearRegistry(year={self._year}, max_day={self._max_day}, "
            f"solved={self._solved_count})"
        )

    @property
    def year(self) -> int:
        return self._year

    @property
    def max_day(self) -> int:
        return self._max_day

    def day(self, day: int) -> DaySolutions | None:
        if not _is_int(day):
            return None
        return self._days.get(day)

    def days(self) -> list[DaySolutions]:
        return [self._days[day] for day in sorted(self._days)]

    def get(self, day: int, part: int) -> Handler | None:
        entry = self.day(day)
        if entry is None or not _is_int(part):
            return None
        return entry.handler(part)

    def solved_count(self) -> int:
        return self._solved_count

    def dispatch(
        self, day: int, part: int, stream: IO[str] | None = None
    ) -> DispatchOutcome:
        handler = self.get(day, part)
        if handler is None:
            logger.debug(
                {"evt": "not_implemented", "year": self._year, "day": day, "part": part}
            )
            return DispatchOutcome.not_implemented(self._year, day, part)

        try:
            result = handler(stream)
        except HandlerError as exc:
            if exc.day is None:
                exc.year, exc.day, exc.part = self._year, day, part
            logger.warning(
                {
                    "evt": "handler_failed",
                    "year": self._year,
                    "day": day,
                    "part": part,
                    "error": exc.message,
                }
            )
            raise
        except Exception as exc:
            logger.warning(
                {
                    "evt": "handler_failed",
                    "year": self._year,
                    "day": day,
                    "part": part,
                    "error": repr(exc),
                }
            )
            raise HandlerError(
                f"{type(exc).__name__}: {exc}", year=self._year, day=day, part=part
            ) from exc
        return DispatchOutcome(
            year=self._year, day=day, part=part, implemented=True, result=result
        )


def default_package(year: int) -> str:
    return f"advent_solutions.year_{year}"


def day_module_name(package: str, day: int) -> str:
    return f"{package}.day_{day:02d}"


def validate_max_day(max_day: int) -> None:
    if not _is_int(max_day):
        raise ConfigurationError(
            f"max_day must be int, got {type(max_day).__name__}"
        )
    if max_day < 0:
        raise ConfigurationError(f"max_day must be >= 0, got {max_day}")
    if max_day > MAX_DAY:
        raise ConfigurationError(f"max_day must be <= {MAX_DAY}, got {max_day}")


def _require_package(package: str, year: int) -> None:
    try:
        importlib.import_module(package)
    except ModuleNotFoundError as exc:
        missing = exc.name or ""
        if missing != package and not package.startswith(f"{missing}."):
            raise
        raise ConfigurationError(
            f"No solutions package for {year}: {package}"
        ) from exc


def _load_day_module(package: str, day: int) -> ModuleType | None:
    name = day_module_name(package, day)
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as exc:
        # Only an absent day module counts as unsolved.
        if exc.name != name:
            raise
        return None


def _probe_part(module: ModuleType, part: int) -> Handler | None:
    handler = getattr(module, f"part_{part:02d}", None)
    if handler is None or not callable(handler):
        return None
    return handler


def build_year_registry(
    year: int, max_day: int, *, package: str | None = None
) -> YearRegistry:
    """Discover the day modules of `package` for days 1..max_day.

    Missing day modules and missing `part_01`/`part_02` functions are recorded
    as absent. Raises ConfigurationError for an invalid range or a year
    package that does not exist.
    """

    validate_max_day(max_day)
    package_name = package or default_package(year)
    if max_day == 0:
        return YearRegistry(year, 0, {})

    _require_package(package_name, year)
    days: dict[int, DaySolutions] = {}
    for day in range(1, max_day + 1):
        module = _load_day_module(package_name, day)
        if module is None:
            logger.debug({"evt": "day_missing", "year": year, "day": day})
            continue
        entry = DaySolutions(
            day=day,
            part_01=_probe_part(module, 1),
            part_02=_probe_part(module, 2),
        )
        logger.debug(
            {
                "evt": "day_discovered",
                "year": year,
                "day": day,
                "parts": list(entry.parts()),
            }
        )
        days[day] = entry
    return YearRegistry(year, max_day, days)
