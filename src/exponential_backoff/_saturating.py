"""Saturating integer arithmetic for backoff durations.

Durations are handled as non-negative integer microseconds, the resolution
of :class:`datetime.timedelta`. Every operation clamps to ``[0, limit]``
instead of growing past the representable range.
"""

from __future__ import annotations

from datetime import timedelta

U32_MAX = 2**32 - 1
"""Upper bound of the unsigned 32-bit counters (retries, factor, exponent)."""

MAX_DURATION_MICROS = timedelta.max // timedelta(microseconds=1)
"""Largest duration representable as a timedelta, in microseconds."""


def saturating_add(a: int, b: int, limit: int = MAX_DURATION_MICROS) -> int:
    """Return ``a + b`` clamped to ``limit``."""
    return min(a + b, limit)


def saturating_sub(a: int, b: int) -> int:
    """Return ``a - b`` floored at zero."""
    return max(a - b, 0)


def saturating_mul(a: int, b: int, limit: int = MAX_DURATION_MICROS) -> int:
    """Return ``a * b`` clamped to ``limit``."""
    return min(a * b, limit)


def saturating_pow(base: int, exponent: int, limit: int = U32_MAX) -> int:
    """Return ``base ** exponent`` clamped to ``limit``.

    Exponents can be as large as ``U32_MAX``, so the power is never computed
    outright: the loop stops as soon as the running product passes the limit.
    """
    if exponent == 0:
        return min(1, limit)
    if base in (0, 1):
        return min(base, limit)

    result = 1
    for _ in range(exponent):
        result *= base
        if result >= limit:
            return limit
    return result


def to_micros(value: timedelta) -> int:
    """Convert a timedelta to whole microseconds."""
    return value // timedelta(microseconds=1)


def from_micros(value: int) -> timedelta:
    """Convert whole microseconds back to a timedelta."""
    return timedelta(microseconds=value)
