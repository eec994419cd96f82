"""Backoff sequence generator.

This module provides :class:`BackoffIter`, the cursor that turns a
:class:`~exponential_backoff.backoff.Backoff` configuration into a lazy,
finite sequence of delays. All duration math is done on integer
microseconds with saturating operations, so pathological configurations
(huge retry budgets, ``timedelta.max`` as the minimum) clamp instead of
raising.
"""

from __future__ import annotations

import logging
import math
import random
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from exponential_backoff._saturating import (
    U32_MAX,
    from_micros,
    saturating_add,
    saturating_mul,
    saturating_pow,
    saturating_sub,
    to_micros,
)

if TYPE_CHECKING:
    from exponential_backoff.backoff import Backoff
    from exponential_backoff.protocols import RandomSource

logger = logging.getLogger(__name__)


class BackoffIter:
    """Single-use cursor over the delays of a backoff schedule.

    The cursor is either active (``retry_count <= retries``) or exhausted
    (``retry_count == retries + 1``). Every call to ``next()`` moves it one
    step; once exhausted it keeps raising ``StopIteration``. Create a new
    cursor through ``Backoff.iter()`` to start over.

    Args:
        backoff: The configuration to read. It is never modified.
        retry_count: Retry index to start from.
        rng: Source of randomness for jitter. Defaults to a private
            ``random.Random`` owned by this cursor.
    """

    def __init__(
        self,
        backoff: Backoff,
        *,
        retry_count: int = 0,
        rng: RandomSource | None = None,
    ) -> None:
        if retry_count < 0:
            raise ValueError(f"retry_count must not be negative, got {retry_count}")
        self._backoff = backoff
        self._retry_count = retry_count
        self._rng: RandomSource = rng if rng is not None else random.Random()

    @property
    def backoff(self) -> Backoff:
        """The configuration this cursor reads from."""
        return self._backoff

    @property
    def retry_count(self) -> int:
        """Number of delays produced so far, plus the starting index."""
        return self._retry_count

    @property
    def is_exhausted(self) -> bool:
        """True once the retry budget has been consumed."""
        return self._retry_count >= self._end

    @property
    def _end(self) -> int:
        # retries + 1, saturating so retries == U32_MAX still terminates
        return saturating_add(self._backoff.retries, 1, U32_MAX)

    def __iter__(self) -> BackoffIter:
        return self

    def __length_hint__(self) -> int:
        return max(self._end - self._retry_count, 0)

    def __next__(self) -> timedelta:
        if self.is_exhausted:
            raise StopIteration

        backoff = self._backoff
        min_micros = to_micros(backoff.min)

        exponent = saturating_pow(backoff.factor, self._retry_count)
        duration = saturating_mul(min_micros, exponent)

        attempt = self._retry_count
        self._retry_count = saturating_add(self._retry_count, 1, U32_MAX)

        duration = self._apply_jitter(duration)

        if backoff.max is not None:
            duration = min(duration, to_micros(backoff.max))
        duration = max(duration, min_micros)

        delay = from_micros(duration)
        logger.debug("Backoff attempt %d: delay %s", attempt, delay)
        if self.is_exhausted:
            logger.debug("Backoff exhausted after %d attempts", self._retry_count)
        return delay

    def _apply_jitter(self, duration: int) -> int:
        """Perturb a duration by a random share of itself.

        Works in hundredths to avoid float duration math. A draw below the
        jitter factor shortens the delay by ``random`` percent; any other
        draw lengthens it by ``random // 2`` percent.

        Args:
            duration: Delay in microseconds before jitter.

        Returns:
            Delay in microseconds after jitter.
        """
        jitter_factor = self._jitter_factor()
        if jitter_factor > 0:
            random_value = self._rng.randrange(0, jitter_factor * 2)
        else:
            random_value = 0

        scaled = saturating_mul(duration, 100)
        if random_value < jitter_factor:
            jitter = saturating_mul(scaled, random_value) // 100
            scaled = saturating_sub(scaled, jitter)
        else:
            jitter = saturating_mul(scaled, random_value // 2) // 100
            scaled = saturating_add(scaled, jitter)
        return scaled // 100

    def _jitter_factor(self) -> int:
        """Jitter as a whole percentage, truncated (0.25 -> 25).

        The percentage is taken from the decimal form of the fraction
        (0.29 -> 29).
        Out-of-range fractions saturate: negative or NaN jitter means none,
        infinite jitter caps at ``U32_MAX``.
        """
        jitter = self._backoff.jitter
        if math.isnan(jitter) or jitter <= 0:
            return 0
        if math.isinf(jitter):
            return U32_MAX
        return min(int(Decimal(str(jitter)) * 100), U32_MAX)
