from __future__ import annotations


class AdventError(Exception):
    """Base exception for the solution registry."""


class ConfigurationError(AdventError, ValueError):
    """Raised when a year registry is declared with an invalid day range."""


class HandlerError(AdventError):
    """Raised when a day/part handler fails.

    The dispatcher fills in `year`, `day` and `part` before the error reaches
    the caller, so handlers can raise it without knowing where they are
    registered.
    """

    def __init__(
        self,
        message: str,
        *,
        year: int | None = None,
        day: int | None = None,
        part: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.year = year
        self.day = day
        self.part = part

    @property
    def origin(self) -> str:
        if self.day is None or self.part is None:
            return "unknown handler"
        prefix = "" if self.year is None else f"{self.year} "
        return f"{prefix}day {self.day} part {self.part}"

    def __str__(self) -> str:
        if self.day is None or self.part is None:
            return self.message
        return f"{self.origin}: {self.message}"


class MissingInputError(HandlerError):
    """Raised by handlers that need puzzle input but were given none."""

    def __init__(
        self, message: str = "puzzle input is required", **kwargs: int | None
    ) -> None:
        super().__init__(message, **kwargs)


class MalformedInputError(HandlerError, ValueError):
    """Raised when puzzle input cannot be parsed."""
