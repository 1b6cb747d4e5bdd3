from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any

from advent_solutions.errors import ConfigurationError
from advent_solutions.registry import (
    DispatchOutcome,
    YearRegistry,
    build_year_registry,
    default_package,
    validate_max_day,
)


@dataclass(frozen=True, slots=True)
class YearSpec:
    year: int
    max_day: int
    package: str
    description: str = ""


_REGISTRY: dict[int, YearSpec] = {}
_BUILT: dict[int, YearRegistry] = {}


def register_year(spec: YearSpec) -> None:
    _REGISTRY[spec.year] = spec
    _BUILT.pop(spec.year, None)


def get_year(year: int) -> YearSpec:
    if year not in _REGISTRY:
        raise KeyError(f"Unknown year: {year}")
    return _REGISTRY[year]


def list_years() -> list[int]:
    return sorted(_REGISTRY.keys())


def iter_years() -> list[YearSpec]:
    return [_REGISTRY[year] for year in sorted(_REGISTRY.keys())]


def load_builtin_years() -> None:
    if _REGISTRY:
        return
    register_year(
        YearSpec(
            year=2015,
            max_day=19,
            package=default_package(2015),
            description="Not Quite Lisp through Medicine for Rudolph",
        )
    )
    register_year(
        YearSpec(
            year=2022,
            max_day=8,
            package=default_package(2022),
            description="Calorie Counting through Treetop Tree House",
        )
    )
    register_year(
        YearSpec(
            year=2023,
            max_day=2,
            package=default_package(2023),
            description="Trebuchet?! and Cube Conundrum",
        )
    )


def apply_year_overrides(overrides: dict[int, int]) -> None:
    """Re-register years with the `max_day` bounds taken from config.

    Every bound is checked before any year is registered, so a bad entry
    raises ConfigurationError and leaves the calendar unchanged.
    """

    for year, max_day in overrides.items():
        try:
            validate_max_day(max_day)
        except ConfigurationError as exc:
            raise ConfigurationError(f"year {year}: {exc}") from exc

    load_builtin_years()
    for year, max_day in overrides.items():
        if year in _REGISTRY:
            current = _REGISTRY[year]
            if current.max_day == max_day:
                continue
            register_year(
                YearSpec(
                    year=year,
                    max_day=max_day,
                    package=current.package,
                    description=current.description,
                )
            )
        else:
            register_year(
                YearSpec(year=year, max_day=max_day, package=default_package(year))
            )


def get_registry(year: int) -> YearRegistry:
    """Return the year's registry, discovering its day modules on first use."""

    load_builtin_years()
    if year not in _BUILT:
        spec = get_year(year)
        _BUILT[year] = build_year_registry(
            spec.year, spec.max_day, package=spec.package
        )
    return _BUILT[year]


def dispatch(
    year: int, day: int, part: int, stream: IO[str] | None = None
) -> DispatchOutcome:
    load_builtin_years()
    if year not in _REGISTRY:
        return DispatchOutcome.not_implemented(year, day, part)
    return get_registry(year).dispatch(day, part, stream)


def days_solved(year: int) -> int:
    return get_registry(year).solved_count()


def year_status(year: int) -> dict[str, Any]:
    registry = get_registry(year)
    return {
        "year": registry.year,
        "max_day": registry.max_day,
        "days_solved": registry.solved_count(),
        "days": {
            str(entry.day): list(entry.parts()) for entry in registry.days()
        },
    }
