"""exponential-backoff exception types."""

from exponential_backoff.exceptions.errors import BackoffConfigError, BackoffError

__all__ = [
    "BackoffError",
    "BackoffConfigError",
]
