"""Pytest configuration and shared predicates."""

from typing import Any


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_fooish(value: Any) -> bool:
    return value in ("foobar", "foobaz")


def is_numeric_str(value: Any) -> bool:
    """Raises AttributeError for non-str values."""
    return value.isdigit()


def never(value: Any) -> bool:
    return False
