"""RandomSource Protocol — structural interface for uniform bounded integers."""

from typing import Protocol


class RandomSource(Protocol):
    """Supplies uniform random integers in ``[0, stop)``.

    ``random.Random`` and ``random.SystemRandom`` satisfy this structurally.
    """

    def randrange(self, stop: int) -> int: ...
