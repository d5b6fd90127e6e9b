"""Recursive ${ENV_VAR} substitution over raw YAML config data."""

import os
import re
from collections.abc import Callable
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced env var that is unset, in first-seen order."""
    missing: list[str] = []
    for var_name in _referenced_vars(data):
        if var_name not in os.environ and var_name not in missing:
            missing.append(var_name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every ${ENV_VAR} replaced by its value.

    Callers must check `collect_missing_vars` first; an unset variable here
    raises KeyError.
    """
    return _map_strings(
        data, lambda text: _ENV_VAR_PATTERN.sub(lambda m: os.environ[m.group(1)], text)
    )


def _referenced_vars(data: RawValue) -> list[str]:
    found: list[str] = []

    def record(text: str) -> str:
        found.extend(_ENV_VAR_PATTERN.findall(text))
        return text

    _map_strings(data, record)
    return found


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data
