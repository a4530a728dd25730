"""Tests for domain/exceptions.py."""

import pytest

from timeline_query.domain.exceptions import (
    CallbackError,
    DuplicateProviderIdError,
    InvalidExpressionError,
    InvalidProviderError,
    InvalidWindowError,
    ProviderNotFoundError,
    TimelineQueryError,
)


class TestProviderNotFoundError:
    """Tests for ProviderNotFoundError."""

    def test_is_lookup_error(self) -> None:
        assert issubclass(ProviderNotFoundError, TimelineQueryError)
        assert issubclass(ProviderNotFoundError, LookupError)

    def test_top_level_message(self) -> None:
        err = ProviderNotFoundError("id-Provider 1")
        assert err.provider_id == "id-Provider 1"
        assert err.and_provider_id is None
        assert str(err) == "provider 'id-Provider 1' not found"

    def test_and_provider_message(self) -> None:
        err = ProviderNotFoundError("id-Provider 1", "id-Provider 2")
        assert err.and_provider_id == "id-Provider 2"
        assert str(err) == "and provider 'id-Provider 2' not found in provider 'id-Provider 1'"


class TestInvalidProviderError:
    """Tests for InvalidProviderError and DuplicateProviderIdError."""

    def test_is_value_error(self) -> None:
        assert issubclass(InvalidProviderError, ValueError)
        assert issubclass(InvalidProviderError, TimelineQueryError)

    def test_message_format(self) -> None:
        err = InvalidProviderError("p1", "id must not be empty")
        assert err.reason == "id must not be empty"
        assert str(err) == "Invalid provider 'p1': id must not be empty"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            InvalidProviderError("p1", "")

    def test_duplicate_top_level(self) -> None:
        err = DuplicateProviderIdError("p1", scope=None)
        assert isinstance(err, InvalidProviderError)
        assert err.scope is None
        assert "top-level providers" in str(err)

    def test_duplicate_in_group(self) -> None:
        err = DuplicateProviderIdError("a1", scope="p1")
        assert err.scope == "p1"
        assert "and group of 'p1'" in str(err)


class TestOtherErrors:
    """Tests for window, expression and callback errors."""

    def test_invalid_window_is_value_error(self) -> None:
        assert issubclass(InvalidWindowError, ValueError)
        assert issubclass(InvalidWindowError, TimelineQueryError)

    def test_invalid_expression_reason(self) -> None:
        err = InvalidExpressionError("unknown expression kind: 'xor'")
        assert err.reason == "unknown expression kind: 'xor'"
        assert isinstance(err, ValueError)

    def test_callback_error_preserves_cause(self) -> None:
        original = RuntimeError("boom")
        err = CallbackError("on_data_provider_removed", original)
        assert err.original is original
        assert err.__cause__ is original
        assert err.callback == "on_data_provider_removed"
        assert str(err) == "on_data_provider_removed raised: RuntimeError: boom"

    def test_can_catch_as_base(self) -> None:
        with pytest.raises(TimelineQueryError):
            raise ProviderNotFoundError("x")
