"""
Element Type Capabilities.

Responsibility boundaries:
- Decides whether a container is a mutable, ordered sequence of numeric
  elements and which element kind it carries.
- Runs before any draw so that rejected calls never mutate their input.

Mutation constraints:
- Read-only: inspects containers and bounds, never writes to them.
"""

import array
from enum import Enum, auto
from typing import Any, Iterator, Protocol, runtime_checkable

import numpy as np
import torch


class ElementKind(Enum):
    INTEGRAL = auto()
    FLOATING = auto()


class UnsupportedContainerError(TypeError):
    pass


@runtime_checkable
class NumericSequence(Protocol):
    """Static shape of a fillable container."""

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...

    def __setitem__(self, index: Any, value: Any) -> None: ...


_INTEGRAL_TYPECODES = frozenset("bBhHiIlLqQ")
_FLOATING_TYPECODES = frozenset("fd")

# bfloat16 has no numpy counterpart, so it is left out
_TORCH_TO_NUMPY = {
    torch.uint8: np.dtype(np.uint8),
    torch.int8: np.dtype(np.int8),
    torch.int16: np.dtype(np.int16),
    torch.int32: np.dtype(np.int32),
    torch.int64: np.dtype(np.int64),
    torch.float16: np.dtype(np.float16),
    torch.float32: np.dtype(np.float32),
    torch.float64: np.dtype(np.float64),
}


def scalar_kind(value: Any) -> ElementKind:
    """
    Classify a single bound value.

    Raises:
        UnsupportedContainerError: if the value is not a real number.
    """
    # bool is an int subclass, so it has to be ruled out first
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedContainerError(f"Boolean bound {value!r} is not numeric.")
    if isinstance(value, (int, np.integer)):
        return ElementKind.INTEGRAL
    if isinstance(value, (float, np.floating)):
        return ElementKind.FLOATING
    raise UnsupportedContainerError(f"Bound {value!r} of type {type(value).__name__} is not numeric.")


def _kind_of_numpy(arr: np.ndarray) -> ElementKind:
    if not arr.flags.writeable:
        raise UnsupportedContainerError("Read-only ndarray cannot be filled in place.")
    if np.issubdtype(arr.dtype, np.bool_):
        raise UnsupportedContainerError("Boolean arrays are not numeric.")
    if np.issubdtype(arr.dtype, np.integer):
        return ElementKind.INTEGRAL
    if np.issubdtype(arr.dtype, np.floating):
        return ElementKind.FLOATING
    raise UnsupportedContainerError(f"ndarray dtype '{arr.dtype}' is not a real numeric type.")


def _kind_of_tensor(tensor: torch.Tensor) -> ElementKind:
    dtype = _TORCH_TO_NUMPY.get(tensor.dtype)
    if dtype is None:
        raise UnsupportedContainerError(f"Tensor dtype '{tensor.dtype}' is not a supported numeric type.")
    if np.issubdtype(dtype, np.integer):
        return ElementKind.INTEGRAL
    return ElementKind.FLOATING


def _kind_of_array(arr: array.array) -> ElementKind:
    if arr.typecode in _INTEGRAL_TYPECODES:
        return ElementKind.INTEGRAL
    if arr.typecode in _FLOATING_TYPECODES:
        return ElementKind.FLOATING
    raise UnsupportedContainerError(f"array typecode '{arr.typecode}' is not numeric.")


def container_kind(sequence: Any) -> ElementKind:
    """
    Element kind fixed by a typed container (ndarray, Tensor, array.array).

    Raises:
        UnsupportedContainerError: for untyped or unsupported containers.
    """
    if isinstance(sequence, np.ndarray):
        return _kind_of_numpy(sequence)
    if isinstance(sequence, torch.Tensor):
        return _kind_of_tensor(sequence)
    if isinstance(sequence, array.array):
        return _kind_of_array(sequence)
    raise UnsupportedContainerError(f"{type(sequence).__name__} does not declare an element type.")


def element_dtype(sequence: Any, kind: ElementKind) -> np.dtype:
    """
    Numpy dtype of the values stored in the container.

    Plain lists hold whatever is drawn: int64 or float64.
    """
    if isinstance(sequence, np.ndarray):
        return sequence.dtype
    if isinstance(sequence, torch.Tensor):
        return _TORCH_TO_NUMPY[sequence.dtype]
    if isinstance(sequence, array.array):
        # array typecodes are the same C type codes numpy uses
        return np.dtype(sequence.typecode)
    if kind is ElementKind.INTEGRAL:
        return np.dtype(np.int64)
    return np.dtype(np.float64)


def resolve_element_kind(sequence: Any, min_value: Any, max_value: Any) -> ElementKind:
    """
    Resolve the sampling kind for a fill call.

    Typed containers decide the kind from their dtype/typecode and the
    bounds must agree with it. Plain lists carry no element type, so the
    bounds decide: two integers select INTEGRAL, any float selects FLOATING.

    Args:
        sequence: The container to be filled.
        min_value: Lower inclusive bound.
        max_value: Upper bound.

    Returns:
        The ElementKind used to pick the sampling strategy.

    Raises:
        UnsupportedContainerError: if the container or bounds fail the
            capability check.
    """
    bound_kinds = {scalar_kind(min_value), scalar_kind(max_value)}

    if isinstance(sequence, list):
        if bound_kinds == {ElementKind.INTEGRAL}:
            return ElementKind.INTEGRAL
        return ElementKind.FLOATING

    if isinstance(sequence, (np.ndarray, torch.Tensor, array.array)):
        kind = container_kind(sequence)
        if kind is ElementKind.INTEGRAL and ElementKind.FLOATING in bound_kinds:
            raise UnsupportedContainerError(
                f"Floating bounds ({min_value!r}, {max_value!r}) given for an integral container."
            )
        return kind

    raise UnsupportedContainerError(
        f"{type(sequence).__name__} is not a mutable numeric sequence "
        "(expected list, array.array, numpy.ndarray or torch.Tensor)."
    )
