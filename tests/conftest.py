"""Shared pytest fixtures for exponential-backoff tests."""

from __future__ import annotations

import random
from datetime import timedelta
from typing import Callable

import pytest

from exponential_backoff import Backoff


class FixedRandom:
    """Random source that always draws the same value and records calls."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self.value


class ForbiddenRandom:
    """Random source that fails the test if it is ever consulted."""

    def randrange(self, start: int, stop: int) -> int:
        raise AssertionError(f"randrange({start}, {stop}) should not be called")


@pytest.fixture
def fixed_rng() -> Callable[[int], FixedRandom]:
    """Factory for random sources that always draw the given value."""
    return FixedRandom


@pytest.fixture
def forbidden_rng() -> ForbiddenRandom:
    """Random source that must not be used."""
    return ForbiddenRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def short_backoff() -> Backoff:
    """Small schedule matching a typical quick retry loop."""
    return Backoff.new(8, timedelta(milliseconds=10), timedelta(milliseconds=20))
