"""
Random Filler.

Responsibility boundaries:
- Overwrites every element of a caller-owned container with an independent
  uniform draw from [min_value, max_value].
- One SeededRNG per call, consumed sequentially in element order.

Mutation constraints:
- Mutates only the passed container, in place; its identity, length and
  shape are preserved.
- Validation happens before the first draw, so a call that raises leaves
  the container untouched.
- No I/O and no process-wide state.
"""

import array
import math
from typing import Any, Tuple

import numpy as np
import torch

from config.config import DEFAULT_SEED
from core.element_types import ElementKind, NumericSequence, element_dtype, resolve_element_kind
from core.sampling import strategy_for
from utils.rng import SeededRNG

_DRAW_LIMITS = np.iinfo(np.int64)


class InvalidRangeError(ValueError):
    pass


def _element_count(sequence: Any) -> int:
    if isinstance(sequence, np.ndarray):
        return int(sequence.size)
    if isinstance(sequence, torch.Tensor):
        return int(sequence.numel())
    return len(sequence)


def _integer_limits(dtype: np.dtype) -> Tuple[int, int]:
    info = np.iinfo(dtype)
    # Draws are int64, so uint64 containers are capped at the int64 maximum
    return max(int(info.min), int(_DRAW_LIMITS.min)), min(int(info.max), int(_DRAW_LIMITS.max))


def _representable_bounds(dtype: np.dtype, min_value, max_value) -> Tuple[Any, Any]:
    """Smallest and largest values of `dtype` inside [min_value, max_value]."""
    low = dtype.type(min_value)
    if float(low) < float(min_value):
        low = np.nextafter(low, dtype.type(np.inf))
    high = dtype.type(max_value)
    if float(high) > float(max_value):
        high = np.nextafter(high, dtype.type(-np.inf))
    return low, high


def _validate_range(kind: ElementKind, dtype: np.dtype, min_value, max_value) -> None:
    if kind is ElementKind.FLOATING:
        largest = float(np.finfo(dtype).max)
        for bound in (min_value, max_value):
            try:
                as_float = float(bound)
            except OverflowError:
                raise InvalidRangeError(f"Bound {bound!r} does not fit in a float.") from None
            if not math.isfinite(as_float):
                raise InvalidRangeError(f"Bound {bound!r} is not a finite number.")
            if abs(as_float) > largest:
                raise InvalidRangeError(f"Bound {bound!r} does not fit in {dtype}.")

    if min_value > max_value:
        raise InvalidRangeError(f"min_value {min_value!r} is greater than max_value {max_value!r}.")

    if kind is ElementKind.INTEGRAL:
        lowest, highest = _integer_limits(dtype)
        for bound in (min_value, max_value):
            if not lowest <= int(bound) <= highest:
                raise InvalidRangeError(f"Bound {bound!r} does not fit in {dtype}.")
        return

    if not math.isfinite(float(max_value) - float(min_value)):
        raise InvalidRangeError(f"Range width {min_value!r}..{max_value!r} overflows a float.")
    low, high = _representable_bounds(dtype, min_value, max_value)
    if low > high:
        raise InvalidRangeError(f"No {dtype} value lies in [{min_value!r}, {max_value!r}].")


def _narrow_floats(values: np.ndarray, dtype: np.dtype, min_value, max_value) -> np.ndarray:
    """Cast float64 draws to the container's width without leaving [min, max]."""
    if dtype == np.float64:
        return values
    low, high = _representable_bounds(dtype, min_value, max_value)
    return np.clip(values.astype(dtype), low, high)


def _write_back(sequence: Any, values: np.ndarray) -> None:
    """Copy drawn values into the container in element order."""
    if isinstance(sequence, np.ndarray):
        np.copyto(sequence, values.reshape(sequence.shape), casting="unsafe")
    elif isinstance(sequence, torch.Tensor):
        source = torch.from_numpy(values).reshape(sequence.shape)
        # Leaf tensors that require grad reject in-place writes outside no_grad
        with torch.no_grad():
            sequence.copy_(source)
    elif isinstance(sequence, array.array):
        sequence[:] = array.array(sequence.typecode, values.tolist())
    else:
        sequence[:] = values.tolist()


def fill_random(sequence: NumericSequence, min_value, max_value, seed: int = DEFAULT_SEED) -> None:
    """
    Fill a numeric container with uniformly distributed pseudo-random values.

    Integral containers receive integers in [min_value, max_value], both ends
    inclusive. Floating containers receive values drawn from
    [min_value, max_value); narrower floats (float16, float32) are rounded to
    the container's width and kept inside [min_value, max_value], so the
    upper bound itself can appear.

    Identical (element kind, seed, bounds, length) always produce identical
    values, whichever supported container type holds them.

    Args:
        sequence: list, array.array, numpy.ndarray or torch.Tensor to fill.
        min_value: Lower inclusive bound.
        max_value: Upper bound.
        seed: Seed for the Mersenne Twister generator. Defaults to 1337.

    Raises:
        UnsupportedContainerError: if the container is not a mutable
            sequence of real numbers, or the bounds do not match its type.
        InvalidRangeError: if min_value > max_value, a bound does not fit in
            the container's element type, a float bound or the range width
            is not finite, or no value of the element type lies in the range.
    """
    kind = resolve_element_kind(sequence, min_value, max_value)
    dtype = element_dtype(sequence, kind)
    _validate_range(kind, dtype, min_value, max_value)

    rng = SeededRNG(seed)
    count = _element_count(sequence)
    if count == 0:
        return

    values = strategy_for(kind).sample(rng, min_value, max_value, count)
    if kind is ElementKind.FLOATING:
        values = _narrow_floats(values, dtype, min_value, max_value)
    _write_back(sequence, values)
