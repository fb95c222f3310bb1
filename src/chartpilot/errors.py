"""Error taxonomy for chart advice flows."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Bounded canonical error codes for logs and span attributes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INFERENCE_ERROR = "INFERENCE_ERROR"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_CODE_GROUPS: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "INPUT",
    ErrorCode.UNSUPPORTED_FORMAT: "INPUT",
    ErrorCode.INFERENCE_ERROR: "DATA",
    ErrorCode.INTERNAL_ERROR: "INTERNAL",
}


def parse_error_code(
    value: Any,
    *,
    fallback: ErrorCode = ErrorCode.INTERNAL_ERROR,
) -> ErrorCode:
    """Parse string-like values to `ErrorCode` with safe fallback."""
    if isinstance(value, ErrorCode):
        return value
    if value is None:
        return fallback
    try:
        return ErrorCode(str(value).strip())
    except ValueError:
        return fallback


def error_code_group(value: Any) -> str:
    """Return a stable coarse grouping for telemetry dimensions."""
    return _CODE_GROUPS.get(parse_error_code(value), "INTERNAL")


class ChartPilotError(Exception):
    """Base class for errors raised by chartpilot."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(ChartPilotError, ValueError):
    """The dataset handed to the advisor failed a presence check."""

    code = ErrorCode.VALIDATION_ERROR


class DatasetRequiredError(InputValidationError):
    """No dataset was supplied."""


class InvalidColumnsError(InputValidationError):
    """The column schema is missing, not a sequence, or unreadable."""


class InvalidRowsError(InputValidationError):
    """The row data is missing or not a sequence."""


class InvalidOptionsError(InputValidationError):
    """Caller options could not be read."""
