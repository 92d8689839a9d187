"""
Sequence Display Helpers.

Responsibility boundaries:
- Renders filled containers as text or JSON for the demonstration.
- Read-only: never mutates the containers it renders.
"""

import json
import sys
from typing import Any, List, Optional, TextIO

import numpy as np
import torch


def _as_python_list(sequence: Any) -> List[Any]:
    """Flatten a container into Python scalars, in fill order."""
    if isinstance(sequence, np.ndarray):
        return sequence.ravel().tolist()
    if isinstance(sequence, torch.Tensor):
        return sequence.detach().cpu().reshape(-1).tolist()
    return list(sequence)


def _format_element(value: Any) -> str:
    if isinstance(value, float):
        # Six significant digits, like a default C stream
        return format(value, "g")
    return str(value)


def format_sequence(sequence: Any) -> str:
    """
    Render as "[a, b, c]". An empty container renders as "".
    """
    values = _as_python_list(sequence)
    if not values:
        return ""
    return "[" + ", ".join(_format_element(v) for v in values) + "]"


def format_json(sequence: Any) -> str:
    """Render as a JSON list."""
    return json.dumps(_as_python_list(sequence))


def write_sequence(sequence: Any, out: Optional[TextIO] = None) -> None:
    """
    Write the text rendering plus a newline.

    Args:
        sequence: Container to render.
        out: Target stream; defaults to sys.stdout at call time.
    """
    stream = out if out is not None else sys.stdout
    stream.write(format_sequence(sequence) + "\n")
