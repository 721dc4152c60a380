"""validchain: chainable, immutable value validation."""

from validchain.core import (
    BoundAssertion,
    BoundValidator,
    ConditionInput,
    FailureEntry,
    Predicate,
    ValidationError,
    Validator,
)

__all__ = [
    "BoundAssertion",
    "BoundValidator",
    "ConditionInput",
    "FailureEntry",
    "Predicate",
    "ValidationError",
    "Validator",
]
