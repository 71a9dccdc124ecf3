"""Recursive ${ENV_VAR} interpolation for raw config data.

A reference may carry a fallback, ``${NAME:-fallback}``, which is used when
NAME is unset. References without a fallback are required.
"""

import os
import re

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every required env var referenced in data that is not set.

    The whole tree is walked so callers can report all missing names at once.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, fallback = match.group(1), match.group(2)
            if fallback is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []


def _substitute(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if fallback is None:
        return os.environ[name]
    return os.environ.get(name, fallback)


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every ${ENV_VAR} reference substituted.

    Call `collect_missing_vars` first; a required variable that is unset
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
