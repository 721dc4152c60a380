"""Reusable validators built from bound assertions.

A BoundValidator is an immutable list of assertions waiting for a value.
Calling it starts a fresh chain and applies each assertion in order:

    Str = Validator.with_assert(is_str, "must be a string")
    Email = Str.with_assert(is_email, "must be an email")

    Email(1).get_failures()  # ["must be a string", "must be an email"]

Extending a bound validator returns a new one; ``Str`` above is unaffected
by the definition of ``Email``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pyrsistent import PVector, pvector

from validchain.core.condition import (
    ConditionInput,
    Predicate,
    check_condition,
    check_predicate,
)
from validchain.core.failure import check_message
from validchain.core.validator import Validator


@dataclass(frozen=True)
class BoundAssertion:
    """A (condition, predicate, message) triple applied to future chains."""

    predicate: Predicate
    message: str
    condition: ConditionInput = True

    def __post_init__(self) -> None:
        check_condition(self.condition)
        check_predicate(self.predicate)
        check_message(self.message)

    def apply(self, chain: Validator) -> Validator:
        if self.condition is True:
            return chain.assert_(self.predicate, self.message)
        return chain.assert_when(self.condition, self.predicate, self.message)


@dataclass(frozen=True)
class BoundValidator:
    """Callable factory producing chains with the bound assertions applied."""

    assertions: PVector = field(default_factory=pvector)

    def __post_init__(self) -> None:
        if not isinstance(self.assertions, PVector):
            object.__setattr__(self, "assertions", pvector(self.assertions))

    def __call__(self, value: Any) -> Validator:
        return self._run(Validator(value))

    def optional(self, value: Any) -> Validator:
        """Like calling the validator, but every assertion passes for None."""
        return self._run(Validator.optional(value))

    def _run(self, chain: Validator) -> Validator:
        for assertion in self.assertions:
            chain = assertion.apply(chain)
        return chain

    def __len__(self) -> int:
        return len(self.assertions)

    def with_assert(self, predicate: Predicate, message: str) -> BoundValidator:
        return BoundValidator(self.assertions.append(BoundAssertion(predicate, message)))

    def with_assert_when(
        self, condition: ConditionInput, predicate: Predicate, message: str
    ) -> BoundValidator:
        """Layer a conditional assertion on top of this one.

        Raises:
            TypeError: If ``condition`` is neither a bool nor a callable.
        """
        return BoundValidator(
            self.assertions.append(BoundAssertion(predicate, message, condition))
        )


__all__ = ["BoundAssertion", "BoundValidator"]
