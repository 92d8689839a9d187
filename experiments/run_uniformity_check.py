"""
Uniformity Check Harness.

Responsibility boundaries:
- Fills large integer and float containers with the seeded filler.
- Collects and prints bucket counts, mean and a chi-square statistic.
"""

import sys
import os
from typing import Dict, Any

import numpy as np
import torch

# Ensure we can import core modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.filler import fill_random
from utils.logger import AuditLogger


def integer_bucket_report(length: int, min_value: int, max_value: int, seed: int) -> Dict[str, Any]:
    """
    Fill an int64 array and count how often each value appears.
    """
    values = np.zeros(length, dtype=np.int64)
    fill_random(values, min_value, max_value, seed=seed)

    counts = np.bincount(values - min_value, minlength=max_value - min_value + 1)
    expected = length / counts.size
    chi_square = float(((counts - expected) ** 2 / expected).sum())

    return {
        "counts": counts.tolist(),
        "mean": float(values.mean()),
        "expected_mean": (min_value + max_value) / 2,
        "chi_square": chi_square,
        "degrees_of_freedom": counts.size - 1,
    }


def float_report(length: int, min_value: float, max_value: float, seed: int) -> Dict[str, Any]:
    """
    Fill a float32 tensor and summarise it.
    """
    values = torch.zeros(length, dtype=torch.float32)
    fill_random(values, min_value, max_value, seed=seed)

    return {
        "min": float(values.min().item()),
        "max": float(values.max().item()),
        "mean": float(values.mean().item()),
        "expected_mean": (min_value + max_value) / 2,
    }


def run_experiment(length: int = 100_000, seed: int = 999):
    print(f"Starting Uniformity Check: {length} draws per container")
    logger = AuditLogger()

    int_report = integer_bucket_report(length, 1, 10, seed)
    logger.log_event("fill", {"container": "ndarray", "length": length, "seed": seed})

    flt_report = float_report(length, 1.0, 100.0, seed)
    logger.log_event("fill", {"container": "tensor", "length": length, "seed": seed})

    print("\n" + "="*30)
    print("Integer Fill [1, 10]")
    print("="*30)
    for value, count in enumerate(int_report["counts"], start=1):
        print(f"  {value:3}: {count}")
    print(f"Mean: {int_report['mean']:.4f} (expected {int_report['expected_mean']:.4f})")
    print(f"Chi-square: {int_report['chi_square']:.2f} (dof={int_report['degrees_of_freedom']})")

    print("\n" + "="*30)
    print("Float Fill [1, 100)")
    print("="*30)
    print(f"Min: {flt_report['min']:.4f}")
    print(f"Max: {flt_report['max']:.4f}")
    print(f"Mean: {flt_report['mean']:.4f} (expected {flt_report['expected_mean']:.4f})")
    print("="*30)
    print(f"Fills recorded: {len(logger)}")


if __name__ == "__main__":
    run_experiment()
