from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from advent_solutions.inputs import DEFAULT_DATA_DIR


def default_config() -> dict[str, Any]:
    return {
        "data_dir": DEFAULT_DATA_DIR,
        "years": {},
    }


def load_config(path: str) -> dict[str, Any]:
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return _expand_env_vars(data)


def _expand_env_vars(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _expand_env_vars(v) for k, v in value.items()}
    return value


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {**base}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def resolve_config(path: str | None) -> dict[str, Any]:
    file_config = load_config(path) if path else {}
    return merge_dicts(default_config(), file_config)


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"{what} must be an integer, got {value!r}")


def normalize_years_config(years_section: Any) -> dict[int, int]:
    """Return a {year: max_day} mapping from the `years` config section.

    Accepts either an object keyed by year or a list of
    `{"year": ..., "max_day": ...}` entries.
    """

    if years_section is None:
        return {}

    years_map: dict[int, int] = {}
    if isinstance(years_section, dict):
        for year, max_day in years_section.items():
            years_map[_as_int(year, "year")] = _as_int(max_day, f"max_day for {year}")
        return years_map

    if isinstance(years_section, list):
        for entry in years_section:
            if not isinstance(entry, dict):
                raise ValueError("years list entries must be objects")
            if "year" not in entry or "max_day" not in entry:
                raise ValueError("years list entries must include year and max_day")
            year = _as_int(entry["year"], "year")
            years_map[year] = _as_int(entry["max_day"], f"max_day for {year}")
        return years_map

    raise ValueError("years must be an object or list")
