"""Backoff configuration model.

A :class:`Backoff` is an immutable description of a retry schedule. It does
not hold any iteration state: every call to ``iter()`` hands out a fresh
:class:`~exponential_backoff.iterator.BackoffIter` cursor, so one
configuration can be shared by any number of concurrent retry loops.

Example:
    >>> from datetime import timedelta
    >>> backoff = Backoff.new(3, timedelta(milliseconds=10), timedelta(seconds=1))
    >>> len(list(backoff))
    4
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exponential_backoff._saturating import U32_MAX

if TYPE_CHECKING:
    from exponential_backoff.iterator import BackoffIter
    from exponential_backoff.protocols import RandomSource

DEFAULT_FACTOR = 2
DEFAULT_JITTER = 0.3

_DURATION_PATTERN = re.compile(
    r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>us|µs|ms|s|m|h|d)\s*$"
)

_DURATION_UNITS = {
    "us": "microseconds",
    "µs": "microseconds",
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(value: Any) -> Any:
    """Parse compact duration strings such as ``"10ms"`` or ``"1.5s"``.

    Anything that does not match is returned unchanged so pydantic's own
    timedelta parsing (numbers as seconds, ISO 8601) still applies.
    """
    if isinstance(value, str):
        match = _DURATION_PATTERN.match(value)
        if match:
            unit = _DURATION_UNITS[match.group("unit")]
            try:
                return timedelta(**{unit: float(match.group("value"))})
            except OverflowError as e:
                raise ValueError(f"duration out of range: {value!r}") from e
    return value


class Backoff(BaseModel):
    """Exponential backoff configuration.

    Iterating a ``Backoff`` yields ``retries + 1`` delays. Delay ``n`` is
    ``min * factor**n`` perturbed by up to ``jitter`` of its value, then
    clamped to ``[min, max]``.

    No semantic validation is applied: a zero factor, a zero ``min`` or a
    ``max`` below ``min`` produce degenerate schedules rather than errors.
    Integer fields are only held to the unsigned 32-bit range they model.

    Attributes:
        retries: Maximum number of retries after the first attempt.
        min: Lower bound of every delay and base of the exponential growth.
        max: Optional upper bound of every delay.
        factor: Growth multiplier applied once per attempt.
        jitter: Fraction of each delay that is randomly perturbed (0 disables).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    retries: int = Field(ge=0, le=U32_MAX)
    min: timedelta
    max: timedelta | None = None
    factor: int = Field(default=DEFAULT_FACTOR, ge=0, le=U32_MAX)
    jitter: float = DEFAULT_JITTER

    @field_validator("min", "max", mode="before")
    @classmethod
    def parse_durations(cls, v: Any) -> Any:
        """Allow compact string input for durations."""
        return parse_duration(v)

    @field_validator("min", "max")
    @classmethod
    def check_non_negative(cls, v: timedelta | None) -> timedelta | None:
        """Reject durations below zero, which no delay can represent."""
        if v is not None and v < timedelta(0):
            raise ValueError(f"duration must not be negative, got {v}")
        return v

    @classmethod
    def new(
        cls, retries: int, min: timedelta, max: timedelta | None = None
    ) -> Backoff:
        """Create a configuration with the default factor and jitter.

        Args:
            retries: Maximum number of retries after the first attempt.
            min: Minimum delay.
            max: Optional maximum delay.

        Returns:
            A new Backoff.
        """
        return cls(retries=retries, min=min, max=max)

    def iter(
        self, retry_count: int = 0, rng: RandomSource | None = None
    ) -> BackoffIter:
        """Start a new delay sequence.

        Args:
            retry_count: Retry index to resume from (0 starts at the beginning).
            rng: Source of randomness for jitter. A private ``random.Random``
                is created when omitted.

        Returns:
            A fresh, single-use cursor over the delays.
        """
        from exponential_backoff.iterator import BackoffIter

        return BackoffIter(self, retry_count=retry_count, rng=rng)

    def __iter__(self) -> BackoffIter:  # type: ignore[override]
        return self.iter()

    def with_retries(self, retries: int) -> Backoff:
        """Return a copy with a different retry budget."""
        return self._replace(retries=retries)

    def with_min(self, min: timedelta) -> Backoff:
        """Return a copy with a different minimum delay."""
        return self._replace(min=min)

    def with_max(self, max: timedelta | None) -> Backoff:
        """Return a copy with a different (or no) maximum delay."""
        return self._replace(max=max)

    def with_factor(self, factor: int) -> Backoff:
        """Return a copy with a different growth factor."""
        return self._replace(factor=factor)

    def with_jitter(self, jitter: float) -> Backoff:
        """Return a copy with a different jitter fraction."""
        return self._replace(jitter=jitter)

    def _replace(self, **changes: Any) -> Backoff:
        # model_copy skips validation, so rebuild through model_validate
        return type(self).model_validate({**self.model_dump(), **changes})
