"""
Verification script for the seeded Mersenne Twister wrapper.
"""

import sys
import os

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.sampling import IntegerUniform, RealUniform
from utils.rng import SeededRNG


def test_matches_numpy_mt19937_stream():
    rng = SeededRNG(42)
    reference = np.random.Generator(np.random.MT19937(42))

    drawn = rng.integers(1, 10, 100)
    expected = reference.integers(1, 10, size=100, dtype=np.int64, endpoint=True)

    assert rng.seed == 42
    assert np.array_equal(drawn, expected)


def test_fresh_instances_repeat():
    a = SeededRNG(5).uniform(0.0, 1.0, 20)
    b = SeededRNG(5).uniform(0.0, 1.0, 20)

    assert np.array_equal(a, b)
    assert np.all((a >= 0.0) & (a < 1.0))


def test_generator_advances_between_draws():
    rng = SeededRNG(9)
    first = rng.integers(0, 1_000_000, 4)
    second = rng.integers(0, 1_000_000, 4)

    assert not np.array_equal(first, second)


def test_strategies_return_requested_count():
    rng = SeededRNG(1)
    ints = IntegerUniform().sample(rng, 0, 3, 12)
    floats = RealUniform().sample(rng, 0, 3, 12)

    assert ints.shape == (12,)
    assert ints.dtype == np.int64
    assert floats.shape == (12,)
    assert floats.dtype == np.float64
