"""
Sampling Strategies.

Responsibility boundaries:
- Integer uniform draws (both bounds inclusive) for integral containers.
- Continuous uniform draws for floating containers.
- Selection is a static table keyed by ElementKind, looked up once per call.
"""

from abc import ABC, abstractmethod
from typing import Dict

import numpy as np

from core.element_types import ElementKind
from utils.rng import SeededRNG


class SamplingStrategy(ABC):
    """
    Draws a batch of values from a uniform distribution.
    """

    @abstractmethod
    def sample(self, rng: SeededRNG, min_value, max_value, count: int) -> np.ndarray:
        """
        Draw `count` values in one sequential pass over the generator.

        Returns:
            A 1-D array of length `count`, in draw order.
        """
        pass


class IntegerUniform(SamplingStrategy):
    """Uniform over the integers min..max, inclusive of both."""

    def sample(self, rng: SeededRNG, min_value, max_value, count: int) -> np.ndarray:
        return rng.integers(int(min_value), int(max_value), count)


class RealUniform(SamplingStrategy):
    """Continuous uniform over [min, max)."""

    def sample(self, rng: SeededRNG, min_value, max_value, count: int) -> np.ndarray:
        return rng.uniform(float(min_value), float(max_value), count)


STRATEGIES: Dict[ElementKind, SamplingStrategy] = {
    ElementKind.INTEGRAL: IntegerUniform(),
    ElementKind.FLOATING: RealUniform(),
}


def strategy_for(kind: ElementKind) -> SamplingStrategy:
    return STRATEGIES[kind]
