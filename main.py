import sys
import os
from typing import Any, List, Optional

import numpy as np

# Add project root to path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.config import DemoConfig, ScenarioConfig
from core.filler import fill_random
from display.formatter import write_sequence
from utils.logger import AuditLogger


def build_container(scenario: ScenarioConfig) -> Any:
    """Allocate the zero-initialised container a scenario asks for."""
    if scenario.container == "list":
        return [0] * scenario.length
    if scenario.container == "ndarray":
        return np.zeros(scenario.length, dtype=scenario.dtype)
    raise ValueError(f"Unknown container '{scenario.container}' in scenario '{scenario.label}'.")


def run_demo(config: DemoConfig, logger: AuditLogger) -> List[Any]:
    """
    Fill and print every configured scenario.

    Returns:
        The filled containers, in scenario order.
    """
    results = []
    for scenario in config.scenarios:
        container = build_container(scenario)
        seed = config.seed_for(scenario)
        fill_random(container, scenario.min_value, scenario.max_value, seed=seed)
        logger.log_event("fill", {
            "label": scenario.label,
            "length": scenario.length,
            "min_value": scenario.min_value,
            "max_value": scenario.max_value,
            "seed": seed,
        })
        write_sequence(container)
        results.append(container)
    return results


def main(config: Optional[DemoConfig] = None) -> int:
    """
    Entry point for the seeded fill demonstration.
    """
    run_demo(config if config is not None else DemoConfig(), AuditLogger())
    return 0


if __name__ == "__main__":
    sys.exit(main())
