"""Seeded linear-congruential generator for reproducible fills."""

from __future__ import annotations

DEFAULT_SEED = 42

_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MASK = 0x7FFFFFFF


class SeededRandom:
    """
    Tiny LCG whose sequence depends only on the seed.

    One instance belongs to one render call. Draws advance a single shared
    state, so the order of calls defines the output.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        self.value = seed & _MASK

    def next(self) -> float:
        """Next draw in [0, 1]."""
        self.value = (self.value * _MULTIPLIER + _INCREMENT) & _MASK
        return self.value / _MASK

    def next_int(self, upper: int) -> int:
        """Next integer in [0, upper)."""
        if upper <= 0:
            raise ValueError("upper must be positive")
        return min(int(self.next() * upper), upper - 1)
