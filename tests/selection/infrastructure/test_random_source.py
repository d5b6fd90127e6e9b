"""Tests for the random source factory."""

import random

from quiz_engine.selection.infrastructure.random_source import create_random_source


class TestCreateRandomSource:
    """Seeded sources are reproducible; unseeded ones use OS entropy."""

    def test_seeded_sources_produce_identical_sequences(self) -> None:
        first = create_random_source(seed=42)
        second = create_random_source(seed=42)

        assert [first.randrange(100) for _ in range(20)] == [
            second.randrange(100) for _ in range(20)
        ]

    def test_seeded_source_is_a_random_instance(self) -> None:
        assert type(create_random_source(seed=1)) is random.Random

    def test_unseeded_source_is_system_random(self) -> None:
        assert isinstance(create_random_source(), random.SystemRandom)

    def test_draws_stay_within_bounds(self) -> None:
        rng = create_random_source(seed=3)

        assert all(0 <= rng.randrange(3) < 3 for _ in range(500))
