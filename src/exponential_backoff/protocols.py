"""Protocols for the capabilities a backoff sequence depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniformly distributed integers used for jitter.

    ``random.Random`` and ``random.SystemRandom`` satisfy this protocol.
    Tests can pass a seeded ``random.Random`` or a small fake to make the
    jitter deterministic.

    Example:
        >>> import random
        >>> isinstance(random.Random(7), RandomSource)
        True
    """

    def randrange(self, start: int, stop: int) -> int:
        """Return a uniform integer in the half-open range ``[start, stop)``.

        Args:
            start: Inclusive lower bound.
            stop: Exclusive upper bound, strictly greater than ``start``.

        Returns:
            The drawn integer.
        """
        ...
