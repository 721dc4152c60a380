"""Tests for failure entries and their rendering."""

import pickle

import pytest

from validchain.core.failure import (
    ValidationError,
    check_message,
    message_of,
    render_entry,
    render_value,
)


class TestValidationError:
    """ValidationError wraps a predicate's exception with a failure message."""

    def test_keeps_failure_message_not_original(self):
        original = ValueError("boom")
        err = ValidationError("a number is expected", original)

        assert err.message == "a number is expected"
        assert str(err) == "a number is expected"
        assert err.original_error is original

    def test_chains_original_as_cause(self):
        original = KeyError("missing")
        err = ValidationError("a key is expected", original)

        assert err.__cause__ is original

    def test_survives_pickling(self):
        original = ValidationError("a number is expected", ValueError("boom"))

        err = pickle.loads(pickle.dumps(original))

        assert err.message == "a number is expected"
        assert str(err) == "a number is expected"
        assert isinstance(err.original_error, ValueError)
        assert err.original_error.args == ("boom",)
        assert err.__cause__ is err.original_error

    def test_is_raisable_exception(self):
        original = ValueError("boom")

        with pytest.raises(ValidationError) as exc:
            raise ValidationError("bad", original)

        assert exc.value.original_error is original

    def test_repr_uses_kind_and_json_message(self):
        err = ValidationError('say "hi"', ValueError())

        assert err.name == "ValidationError"
        assert repr(err) == 'ValidationError("say \\"hi\\"")'


class TestEntryHelpers:
    """Helpers shared by the chain for messages and rendering."""

    def test_message_of_plain_entry(self):
        assert message_of("a string is expected") == "a string is expected"

    def test_message_of_error_entry(self):
        assert message_of(ValidationError("wrapped", TypeError())) == "wrapped"

    def test_render_plain_entry_is_json(self):
        assert render_entry("a string") == '"a string"'

    def test_render_value_falls_back_to_repr(self):
        value = object()

        assert render_value(value) == repr(value)
        assert render_value({"a": [1, None]}) == '{"a": [1, null]}'

    @pytest.mark.parametrize("message", [None, 1, b"bytes", ["x"]])
    def test_check_message_rejects_non_str(self, message):
        with pytest.raises(TypeError, match="failure message must be str"):
            check_message(message)
