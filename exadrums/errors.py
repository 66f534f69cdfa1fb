"""Error values, their severities, and the exception raised by the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

# Messages are kept to the size of the fixed buffer used by the C interface.
MAX_MESSAGE_LENGTH = 254


class ErrorType(IntEnum):
    """Severity of an error, ordered from least to most severe."""

    SUCCESS = 0
    WARNING = 1
    QUESTION = 2
    ERROR = 3
    OTHER = 4


@dataclass(frozen=True)
class Error:
    """A message paired with its severity."""

    message: str = ""
    error_type: ErrorType = ErrorType.SUCCESS

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", self.message[:MAX_MESSAGE_LENGTH])
        object.__setattr__(self, "error_type", ErrorType(self.error_type))


class ExadrumsError(Exception):
    """Exception carrying a message and an error severity."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = ErrorType(error_type)


def make_error(message: str, error_type: ErrorType) -> Error:
    """Build an error value; the message is truncated to the buffer size."""
    return Error(message, error_type)


def merge_errors(first: Error, second: Error) -> Error:
    """Return the more severe of two errors, preferring the first on a tie."""
    return first if first.error_type >= second.error_type else second


def error_to_exception(func: Callable[[], Error]) -> None:
    """Call ``func`` and raise if the error it returns is not a success."""
    err = func()
    if err.error_type != ErrorType.SUCCESS:
        raise ExadrumsError(err.message, err.error_type)


def exception_to_error(func: Callable[[], Any]) -> Error:
    """Call ``func`` and turn any exception it raises into an error value."""
    try:
        func()
    except ExadrumsError as exc:
        return make_error(str(exc.message), exc.error_type)
    except Exception:
        return make_error("Unknown error.", ErrorType.ERROR)
    return Error("", ErrorType.SUCCESS)