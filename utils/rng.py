"""
Seeded Random Number Generator Utility.

This module provides the generator used by every fill call to ensure
strict reproducibility.

Responsibility boundaries:
- Wraps a numpy Mersenne Twister (MT19937) bit generator.
- One instance per fill call; instances are never shared or cached.

Mutation constraints:
- The internal state of the RNG is mutated only when drawing random numbers.
- The seed can only be set once during initialization.
"""

import numpy as np


class SeededRNG:
    """
    A seeded Mersenne Twister generator producing vectorised draws.
    """

    def __init__(self, seed: int) -> None:
        """
        Initialize the RNG with a specific seed.

        Args:
            seed: A non-negative integer seed for deterministic execution.
        """
        self._seed = seed
        self._generator = np.random.Generator(np.random.MT19937(seed))

    @property
    def seed(self) -> int:
        return self._seed

    def integers(self, low: int, high: int, count: int) -> np.ndarray:
        """Draw `count` integers N such that low <= N <= high."""
        return self._generator.integers(low, high, size=count, dtype=np.int64, endpoint=True)

    def uniform(self, low: float, high: float, count: int) -> np.ndarray:
        """Draw `count` floats uniformly from [low, high)."""
        return self._generator.uniform(low, high, size=count)
