"""Configuration helpers for chartpilot."""

from chartpilot.config.settings import (
    DEFAULT_MAX_CHARTS,
    DEFAULT_PREFERRED_FORMAT,
    default_options,
    get_default_max_charts,
    get_default_preferred_format,
)

__all__ = [
    "DEFAULT_MAX_CHARTS",
    "DEFAULT_PREFERRED_FORMAT",
    "default_options",
    "get_default_max_charts",
    "get_default_preferred_format",
]
