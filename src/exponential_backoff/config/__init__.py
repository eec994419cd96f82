"""Configuration loading for backoff schedules.

Example:
    >>> from exponential_backoff.config import BackoffLoader
    >>>
    >>> loader = BackoffLoader()
    >>> backoff = loader.load("retry.yaml")  # doctest: +SKIP
"""

from .loader import BackoffLoader

__all__ = ["BackoffLoader"]
