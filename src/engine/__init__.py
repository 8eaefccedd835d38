"""Game engine components."""

from .scenario import DemoBattle, ScenarioStep, SiegeResult, run_siege

__all__ = [
    "DemoBattle",
    "ScenarioStep",
    "SiegeResult",
    "run_siege",
]
