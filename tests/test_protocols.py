"""Tests for the RandomSource protocol."""

from __future__ import annotations

import random

from exponential_backoff import RandomSource


class TestRandomSource:
    """Tests for RandomSource conformance."""

    def test_random_conforms(self):
        """random.Random satisfies the protocol."""
        assert isinstance(random.Random(1), RandomSource)

    def test_system_random_conforms(self):
        """random.SystemRandom satisfies the protocol."""
        assert isinstance(random.SystemRandom(), RandomSource)

    def test_custom_source_conforms(self, fixed_rng):
        """Any object with randrange satisfies the protocol."""
        assert isinstance(fixed_rng(3), RandomSource)

    def test_object_without_randrange(self):
        """Objects lacking randrange do not conform."""
        assert not isinstance(object(), RandomSource)
