"""Failure entries recorded by a validation chain.

A chain records two kinds of outcome per failed assertion:

- a plain ``str`` message when the predicate returned a falsy result;
- a :class:`ValidationError` when the predicate raised. It carries the same
  human-readable message plus the exception that was raised.
"""

from __future__ import annotations

import json
from typing import Any, TypeAlias


class ValidationError(Exception):
    """A predicate raised while a chain was evaluating it.

    ``message`` is the failure message supplied with the assertion, not the
    message of the underlying exception. The exception itself is kept on
    ``original_error`` (and as ``__cause__``) for internal logging.
    """

    name = "ValidationError"

    def __init__(self, message: str, original_error: BaseException):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.__cause__ = original_error

    def __reduce__(self):
        return (type(self), (self.message, self.original_error))

    def __repr__(self) -> str:
        return f"{self.name}({json.dumps(self.message)})"


FailureEntry: TypeAlias = "str | ValidationError"


def message_of(entry: FailureEntry) -> str:
    if isinstance(entry, ValidationError):
        return entry.message
    return entry


def check_message(message: Any) -> str:
    if not isinstance(message, str):
        raise TypeError(f"failure message must be str, got {type(message).__name__}")
    return message


def render_entry(entry: FailureEntry) -> str:
    if isinstance(entry, ValidationError):
        return repr(entry)
    return json.dumps(entry)


def render_value(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


__all__ = [
    "FailureEntry",
    "ValidationError",
    "check_message",
    "message_of",
    "render_entry",
    "render_value",
]
