"""Immutable validation chains.

Each assertion is a pure transition:
    Validator(value, failures) -> Validator(value, failures + outcome)

Predicates that return a falsy result record their message; predicates that
raise record a ValidationError wrapping the exception.
"""

from validchain.core.bound import BoundAssertion, BoundValidator
from validchain.core.condition import ConditionInput, Predicate
from validchain.core.failure import FailureEntry, ValidationError
from validchain.core.validator import Validator

__all__ = [
    # Chain
    "Validator",
    # Reusable validators
    "BoundAssertion",
    "BoundValidator",
    # Failures
    "FailureEntry",
    "ValidationError",
    # Typing helpers
    "ConditionInput",
    "Predicate",
]
