"""Conditions deciding whether a conditional assertion applies.

A condition is either a ``bool`` literal or a callable evaluated against the
wrapped value. Anything else is a programming error and raises ``TypeError``
at the call site instead of being recorded as a failure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

Predicate: TypeAlias = Callable[[Any], Any]
ConditionInput: TypeAlias = "bool | Predicate"


def check_condition(condition: object) -> ConditionInput:
    """Return ``condition`` unchanged if it is a bool or a callable."""
    if isinstance(condition, bool) or callable(condition):
        return condition
    raise TypeError(
        f"condition must be a bool or a callable taking the value, got {type(condition).__name__}"
    )


def check_predicate(predicate: object) -> Predicate:
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
    return predicate


def condition_holds(condition: ConditionInput, value: Any) -> bool:
    """Evaluate a checked condition against ``value``.

    Callable conditions are called exactly once. Exceptions they raise
    propagate; only predicates have their exceptions captured.
    """
    if isinstance(condition, bool):
        return condition
    return bool(condition(value))


__all__ = [
    "ConditionInput",
    "Predicate",
    "check_condition",
    "check_predicate",
    "condition_holds",
]
