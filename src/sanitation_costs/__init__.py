"""Economic cost of inadequate sanitation: deterministic model and Monte Carlo analysis."""

from .parameters import (
    AccessInputs,
    CarbonInputs,
    EMISSION_PRESETS,
    EmissionFactorSource,
    HealthInputs,
    MacroInputs,
    ModelInputs,
    MortalityMethod,
    NutritionInputs,
    OtherCostInputs,
    default_inputs,
)
from .cost_model import CostBreakdown, ModelOutputs, evaluate
from .monte_carlo import SimulationStats, simulate

__all__ = [
    "AccessInputs",
    "CarbonInputs",
    "CostBreakdown",
    "EMISSION_PRESETS",
    "EmissionFactorSource",
    "HealthInputs",
    "MacroInputs",
    "ModelInputs",
    "ModelOutputs",
    "MortalityMethod",
    "NutritionInputs",
    "OtherCostInputs",
    "SimulationStats",
    "default_inputs",
    "evaluate",
    "simulate",
]
