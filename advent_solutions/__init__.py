"""Puzzle solutions organized by year, day and part, with a dispatch registry."""

from __future__ import annotations

from .errors import (
    AdventError,
    ConfigurationError,
    HandlerError,
    MalformedInputError,
    MissingInputError,
)
from .registry import (
    MAX_DAY,
    DaySolutions,
    DispatchOutcome,
    YearRegistry,
    build_year_registry,
)
from .years import (
    YearSpec,
    days_solved,
    dispatch,
    get_registry,
    list_years,
    load_builtin_years,
)

__all__ = [
    "AdventError",
    "ConfigurationError",
    "DaySolutions",
    "DispatchOutcome",
    "HandlerError",
    "MAX_DAY",
    "MalformedInputError",
    "MissingInputError",
    "YearRegistry",
    "YearSpec",
    "build_year_registry",
    "days_solved",
    "dispatch",
    "get_registry",
    "list_years",
    "load_builtin_years",
]
