"""Immutable validation chain.

A Validator wraps a value and a persistent vector of failure entries.
Every assertion returns a new Validator; the receiver is never modified:

    Validator(value).assert_(is_str, "a string is expected")
                    .assert_when(is_str, is_email, "an email is expected")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pyrsistent import PVector, pvector

from validchain.core.condition import (
    ConditionInput,
    Predicate,
    check_condition,
    check_predicate,
    condition_holds,
)
from validchain.core.failure import (
    FailureEntry,
    ValidationError,
    check_message,
    message_of,
    render_entry,
    render_value,
)

if TYPE_CHECKING:
    from validchain.core.bound import BoundValidator


@dataclass(frozen=True, repr=False)
class Validator:
    """An immutable value plus the failures recorded against it so far.

    Attributes:
        value: The subject under validation.
        failures: Failure entries in the order their assertions were applied.
        is_optional: When True and ``value`` is None, assertions are skipped.
    """

    value: Any
    failures: PVector = field(default_factory=pvector)
    is_optional: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.failures, PVector):
            object.__setattr__(self, "failures", pvector(self.failures))

    @classmethod
    def optional(cls, value: Any) -> Validator:
        """Create a chain that passes every assertion when ``value`` is None."""
        return cls(value, is_optional=True)

    @staticmethod
    def is_validator(obj: object) -> bool:
        return isinstance(obj, Validator)

    @staticmethod
    def with_assert(predicate: Predicate, message: str) -> BoundValidator:
        """Bind an assertion into a reusable validator factory."""
        from validchain.core.bound import BoundValidator

        return BoundValidator().with_assert(predicate, message)

    @staticmethod
    def with_assert_when(
        condition: ConditionInput, predicate: Predicate, message: str
    ) -> BoundValidator:
        """Bind a conditional assertion into a reusable validator factory."""
        from validchain.core.bound import BoundValidator

        return BoundValidator().with_assert_when(condition, predicate, message)

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def _skips(self) -> bool:
        return self.is_optional and self.value is None

    def _record(self, entry: FailureEntry) -> Validator:
        return Validator(self.value, self.failures.append(entry), self.is_optional)

    def assert_(self, predicate: Predicate, message: str) -> Validator:
        """Apply ``predicate`` to the value, recording ``message`` on failure.

        A falsy result records ``message``. An exception raised by the
        predicate is captured as a ValidationError carrying ``message``;
        it is never propagated.
        """
        check_predicate(predicate)
        check_message(message)
        if self._skips():
            return self
        try:
            passed = bool(predicate(self.value))
        except Exception as exc:
            return self._record(ValidationError(message, exc))
        if passed:
            return self
        return self._record(message)

    def assert_when(
        self, condition: ConditionInput, predicate: Predicate, message: str
    ) -> Validator:
        """Apply ``assert_`` only when ``condition`` holds for the value.

        Raises:
            TypeError: If ``condition`` is neither a bool nor a callable.
        """
        check_condition(condition)
        check_predicate(predicate)
        check_message(message)
        if self._skips():
            return self
        if not condition_holds(condition, self.value):
            return self
        return self.assert_(predicate, message)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def has_failures(self) -> bool:
        return len(self.failures) > 0

    def has_errors(self) -> bool:
        return any(isinstance(entry, ValidationError) for entry in self.failures)

    def get_failures_and_errors(self) -> list[FailureEntry]:
        return list(self.failures)

    def get_failures(self) -> list[str]:
        """Return every failure as its display message, errors included."""
        return [message_of(entry) for entry in self.failures]

    def get_errors(self) -> list[ValidationError]:
        return [entry for entry in self.failures if isinstance(entry, ValidationError)]

    def __repr__(self) -> str:
        name = "Validator.optional" if self.is_optional else "Validator"
        entries = ", ".join(render_entry(entry) for entry in self.failures)
        return f"{name}({render_value(self.value)}, [{entries}])"

    __str__ = __repr__


__all__ = ["Validator"]
