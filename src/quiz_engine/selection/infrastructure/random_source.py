"""Random source factory — seeded for reproducible runs, OS entropy otherwise."""

import random

from quiz_engine.selection.domain.random_source import RandomSource


def create_random_source(seed: int | None = None) -> RandomSource:
    """Return a deterministic ``random.Random`` for a seed, else ``random.SystemRandom``."""
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)
