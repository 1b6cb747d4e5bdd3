from __future__ import annotations

import importlib
import sys
from typing import Any, Protocol


class PartProgressReporter(Protocol):
    def on_part_complete(self, label: str, *, failed: bool) -> None: ...

    def close(self) -> None: ...


class NoopPartProgressReporter:
    def on_part_complete(self, label: str, *, failed: bool) -> None:  # noqa: ARG002
        return

    def close(self) -> None:
        return


class TqdmPartProgressReporter:
    """Progress bar over solved parts, with a running failure tally."""

    def __init__(self, *, total_parts: int, tqdm_cls: Any) -> None:
        self._completed = 0
        self._failed = 0
        self._bar = tqdm_cls(
            total=total_parts, desc="Parts", unit="part", file=sys.stderr
        )

    def on_part_complete(self, label: str, *, failed: bool) -> None:
        self._completed += 1
        self._failed += int(failed)
        self._bar.set_postfix(
            {"last": label, "failed": f"{self._failed}/{self._completed}"},
            refresh=False,
        )
        self._bar.update(1)

    def close(self) -> None:
        self._bar.close()


def _load_tqdm() -> Any | None:
    try:
        return getattr(importlib.import_module("tqdm"), "tqdm", None)
    except ImportError:
        return None


def build_progress_reporter(
    *,
    enabled: bool,
    total_parts: int,
    explicit_request: bool,
) -> PartProgressReporter:
    if not enabled or total_parts <= 0:
        return NoopPartProgressReporter()

    tqdm_cls = _load_tqdm()
    if tqdm_cls is None:
        if explicit_request:
            print(
                "Progress requested but tqdm is unavailable. Install with "
                "pip install 'advent-solutions[progress]'.",
                file=sys.stderr,
                flush=True,
            )
        return NoopPartProgressReporter()
    return TqdmPartProgressReporter(total_parts=total_parts, tqdm_cls=tqdm_cls)
