"""exponential-backoff exception types."""

from __future__ import annotations


class BackoffError(Exception):
    """Base exception for all exponential-backoff errors."""

    pass


class BackoffConfigError(BackoffError):
    """Raised when a backoff configuration cannot be loaded.

    This includes missing files, YAML parsing errors, documents that are
    not mappings, and schema validation failures.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)
