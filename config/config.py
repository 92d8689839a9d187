"""
Configuration Utility.

Responsibility boundaries:
- Holds the default seed and the demonstration scenarios.
- Must be passed explicitly to the systems that use it.

Mutation constraints:
- Frozen after initialization; nothing reads configuration from globals
  or environment variables.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

DEFAULT_SEED = 1337

Number = Union[int, float]


@dataclass(frozen=True)
class FillConfig:
    """
    Immutable defaults for fill calls.
    """
    seed: int = DEFAULT_SEED


@dataclass(frozen=True)
class ScenarioConfig:
    """
    One demonstration run: which container to build and how to fill it.

    `container` is either "list" or "ndarray"; `dtype` is a numpy dtype name
    and is ignored for lists (the bounds decide the element kind there).
    A scenario without a seed uses the DemoConfig fill defaults.
    """
    label: str
    container: str
    dtype: str
    length: int
    min_value: Number
    max_value: Number
    seed: Optional[int] = None


def _default_scenarios() -> Tuple[ScenarioConfig, ...]:
    return (
        ScenarioConfig("list_int", "list", "int64", 10, 1, 10, seed=42),
        ScenarioConfig("array_int", "ndarray", "int32", 10, 1, 10, seed=43),
        ScenarioConfig("array_float", "ndarray", "float32", 1, 1.0, 100.0),
    )


@dataclass(frozen=True)
class DemoConfig:
    """
    Immutable container defining the demonstration run.
    """
    scenarios: Tuple[ScenarioConfig, ...] = field(default_factory=_default_scenarios)
    fill: FillConfig = field(default_factory=FillConfig)

    def seed_for(self, scenario: ScenarioConfig) -> int:
        return scenario.seed if scenario.seed is not None else self.fill.seed
