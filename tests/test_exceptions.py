"""Tests for exponential-backoff exception types."""

from __future__ import annotations

import pytest

from exponential_backoff import BackoffConfigError, BackoffError
from exponential_backoff.exceptions import errors


class TestBackoffError:
    """Tests for the base BackoffError exception."""

    def test_is_exception(self) -> None:
        """BackoffError should be an Exception subclass."""
        assert issubclass(BackoffError, Exception)

    def test_can_raise_and_catch(self) -> None:
        """BackoffError can be raised and caught."""
        with pytest.raises(BackoffError) as exc_info:
            raise BackoffError("test error")
        assert str(exc_info.value) == "test error"


class TestBackoffConfigError:
    """Tests for BackoffConfigError exception."""

    def test_is_backoff_error(self) -> None:
        """BackoffConfigError should be a BackoffError subclass."""
        assert issubclass(BackoffConfigError, BackoffError)

    def test_stores_source(self) -> None:
        """BackoffConfigError keeps the configuration source."""
        error = BackoffConfigError("bad config", source="retry.yaml")
        assert error.source == "retry.yaml"
        assert str(error) == "bad config"

    def test_source_is_optional(self) -> None:
        """The source defaults to None."""
        assert BackoffConfigError("bad config").source is None

    def test_caught_as_backoff_error(self) -> None:
        """BackoffConfigError can be caught as BackoffError."""
        with pytest.raises(BackoffError):
            raise BackoffConfigError("config error")


class TestExceptionsPackage:
    """Tests for the exceptions package layout."""

    def test_reexports_errors_module(self) -> None:
        """The package exposes the classes defined in errors."""
        assert BackoffError is errors.BackoffError
        assert BackoffConfigError is errors.BackoffConfigError
