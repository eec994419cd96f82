"""exponential-backoff - Jittered exponential backoff delay sequences.

A ``Backoff`` describes a retry schedule; iterating it yields one delay per
attempt, ``retries + 1`` in total. The caller does the waiting and the
retrying.

Example:
    >>> import random
    >>> from datetime import timedelta
    >>> from exponential_backoff import Backoff
    >>>
    >>> backoff = Backoff.new(3, timedelta(milliseconds=10), timedelta(seconds=1))
    >>> delays = list(backoff.iter(rng=random.Random(0)))
    >>> len(delays)
    4
    >>> all(timedelta(milliseconds=10) <= d <= timedelta(seconds=1) for d in delays)
    True
"""

from exponential_backoff.backoff import DEFAULT_FACTOR, DEFAULT_JITTER, Backoff
from exponential_backoff.config import BackoffLoader
from exponential_backoff.exceptions import BackoffConfigError, BackoffError
from exponential_backoff.iterator import BackoffIter
from exponential_backoff.protocols import RandomSource

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "BackoffError",
    "BackoffConfigError",
    # Configuration
    "Backoff",
    "BackoffLoader",
    "DEFAULT_FACTOR",
    "DEFAULT_JITTER",
    # Iteration
    "BackoffIter",
    "RandomSource",
]
