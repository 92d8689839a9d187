"""
Verification script for the display helpers and audit logger.
"""

import sys
import os
import io
import json
from dataclasses import FrozenInstanceError

import numpy as np
import pytest
import torch

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from display.formatter import format_json, format_sequence, write_sequence
from utils.logger import AuditLogger


def test_format_integers():
    assert format_sequence([3, 1, 2]) == "[3, 1, 2]"
    assert format_sequence(np.array([7], dtype=np.int32)) == "[7]"


def test_format_floats_uses_short_form():
    assert format_sequence([1.5, 2.0, 1e6]) == "[1.5, 2, 1e+06]"
    assert format_sequence(np.array([0.25], dtype=np.float32)) == "[0.25]"


def test_format_empty_is_blank():
    assert format_sequence([]) == ""
    assert format_json([]) == "[]"


def test_format_flattens_in_fill_order():
    grid = torch.tensor([[1, 2], [3, 4]])
    assert format_sequence(grid) == "[1, 2, 3, 4]"
    assert json.loads(format_json(grid)) == [1, 2, 3, 4]


def test_write_sequence_does_not_mutate():
    values = [4, 5]
    out = io.StringIO()
    write_sequence(values, out)

    assert out.getvalue() == "[4, 5]\n"
    assert values == [4, 5]


def test_audit_records_are_immutable():
    logger = AuditLogger()
    payload = {"seed": 42}
    logger.log_event("fill", payload)
    logger.log_event("other", {})
    payload["seed"] = 0

    record = logger.records[0]
    assert len(logger) == 2
    assert record.sequence_number == 0
    assert record.data["seed"] == 42
    assert [r.event_type for r in logger.events_of("fill")] == ["fill"]

    with pytest.raises(TypeError):
        record.data["seed"] = 1
    with pytest.raises(FrozenInstanceError):
        record.event_type = "changed"
