"""
Verification script for container capability checks.
"""

import sys
import os
import array

import numpy as np
import pytest
import torch

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.element_types import (
    ElementKind,
    NumericSequence,
    UnsupportedContainerError,
    container_kind,
    element_dtype,
    resolve_element_kind,
    scalar_kind,
)
from core.sampling import IntegerUniform, RealUniform, strategy_for


def test_scalar_kinds():
    assert scalar_kind(3) is ElementKind.INTEGRAL
    assert scalar_kind(np.int8(3)) is ElementKind.INTEGRAL
    assert scalar_kind(3.0) is ElementKind.FLOATING
    assert scalar_kind(np.float32(3.0)) is ElementKind.FLOATING

    for bad in (True, np.bool_(False), "3", None, 1j):
        with pytest.raises(UnsupportedContainerError):
            scalar_kind(bad)


def test_list_kind_follows_bounds():
    assert resolve_element_kind([0], 1, 10) is ElementKind.INTEGRAL
    assert resolve_element_kind([0], 1.0, 10.0) is ElementKind.FLOATING
    assert resolve_element_kind([0], 1, 10.0) is ElementKind.FLOATING
    assert resolve_element_kind([0], np.int64(1), np.int64(9)) is ElementKind.INTEGRAL


def test_typed_containers_follow_dtype():
    assert container_kind(np.zeros(1, dtype=np.uint16)) is ElementKind.INTEGRAL
    assert container_kind(np.zeros(1, dtype=np.float16)) is ElementKind.FLOATING
    assert container_kind(torch.zeros(1, dtype=torch.int32)) is ElementKind.INTEGRAL
    assert container_kind(torch.zeros(1, dtype=torch.float64)) is ElementKind.FLOATING
    assert container_kind(array.array("H", [0])) is ElementKind.INTEGRAL
    assert container_kind(array.array("f", [0.0])) is ElementKind.FLOATING


def test_float_container_accepts_integer_bounds():
    assert resolve_element_kind(np.zeros(2), 1, 100) is ElementKind.FLOATING


def test_untyped_container_has_no_dtype_kind():
    with pytest.raises(UnsupportedContainerError):
        container_kind([0, 1])


def test_unicode_array_is_rejected():
    with pytest.raises(UnsupportedContainerError):
        container_kind(array.array("u", "ab"))


def test_protocol_matches_supported_containers():
    assert isinstance([0], NumericSequence)
    assert isinstance(np.zeros(2), NumericSequence)
    assert isinstance(array.array("i", [0]), NumericSequence)
    assert not isinstance((0, 1), NumericSequence)


def test_strategy_table():
    assert isinstance(strategy_for(ElementKind.INTEGRAL), IntegerUniform)
    assert isinstance(strategy_for(ElementKind.FLOATING), RealUniform)


def test_element_dtype_per_container():
    assert element_dtype(np.zeros(1, dtype=np.int8), ElementKind.INTEGRAL) == np.int8
    assert element_dtype(torch.zeros(1, dtype=torch.uint8), ElementKind.INTEGRAL) == np.uint8
    assert element_dtype(array.array("b", [0]), ElementKind.INTEGRAL) == np.int8
    assert element_dtype(array.array("f", [0.0]), ElementKind.FLOATING) == np.float32
    assert element_dtype([0], ElementKind.INTEGRAL) == np.int64
    assert element_dtype([0.0], ElementKind.FLOATING) == np.float64


def test_bfloat16_tensor_is_rejected():
    with pytest.raises(UnsupportedContainerError):
        container_kind(torch.zeros(1, dtype=torch.bfloat16))
