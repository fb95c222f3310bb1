"""Readers for ``CHARTPILOT_*`` and OTEL settings held in the environment.

Each reader returns ``default`` when the variable is unset, raises
``KeyError`` when it is unset but ``required``, and raises ``ValueError``
when it is set to something it cannot parse.
"""

import os
from typing import List, Optional

_TRUTHY = ("true", "1", "yes", "on")
_FALSEY = ("false", "0", "no", "off", "")


def _read(name: str, required: bool) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None and required:
        raise KeyError(f"{name} must be set")
    return raw


def get_env_str(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    raw = _read(name, required)
    return default if raw is None else raw


def get_env_int(name: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Read an integer; surrounding whitespace is ignored."""
    raw = _read(name, required)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name}={raw!r} is not a valid integer")


def get_env_bool(
    name: str, default: Optional[bool] = None, required: bool = False
) -> Optional[bool]:
    """Read a flag: true/1/yes/on or false/0/no/off/empty, case-insensitive."""
    raw = _read(name, required)
    if raw is None:
        return default

    flag = raw.strip().lower()
    if flag in _TRUTHY:
        return True
    if flag in _FALSEY:
        return False
    raise ValueError(f"{name}={raw!r} is not a valid flag")


def get_env_list(
    name: str, default: Optional[List[str]] = None, required: bool = False, separator: str = ","
) -> Optional[List[str]]:
    """Read a separated list, dropping blank items."""
    raw = _read(name, required)
    if raw is None:
        return default
    return [item.strip() for item in raw.split(separator) if item.strip()]
