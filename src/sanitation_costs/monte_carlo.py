"""
===============================================================================
monte_carlo.py
Last Updated: 2026-10-17
===============================================================================
Monte Carlo uncertainty analysis for the sanitation cost model

Each iteration builds an independent copy of the baseline inputs with
uniform multiplicative noise applied to ~25 uncertain fields:

    value * Uniform(1 - p, 1 + p)

probabilities are clamped back into their valid range. Every perturbed
input set is evaluated with the deterministic cost model and the sample of
totals is reduced to mean, median, P5/P95 (nearest rank), population
standard deviation and a per-category mean breakdown.

The baseline is never modified: sections are frozen dataclasses and each
iteration reconstructs its own copies field by field.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .cost_model import CostBreakdown, evaluate
from .parameters import ModelInputs, MortalityMethod
from .utils.statistics import summarize_sample

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 500
ITERATION_PRESETS = (500, 2000, 10000)


@dataclass(frozen=True)
class Perturbation:
    """Noise model for one input field.

    Attributes:
    section: str. Input section name ('macro', 'health', ...)
    name: str. Field name within the section
    spread: float. Half-width p of the multiplicative uniform noise
    bounds: tuple, optional. (lower, upper) clamp applied after the draw
    method: MortalityMethod, optional. Only perturb under this mortality method
    """
    section: str
    name: str
    spread: float
    bounds: Optional[Tuple[float, float]] = None
    method: Optional[MortalityMethod] = None

    def applies_to(self, inputs: ModelInputs) -> bool:
        return self.method is None or inputs.macro.mortality_method is self.method

    def draw(self, value: float, rng: np.random.Generator) -> float:
        sampled = float(rng.uniform(value * (1 - self.spread), value * (1 + self.spread)))
        if self.bounds is not None:
            sampled = min(max(sampled, self.bounds[0]), self.bounds[1])
        return sampled


PERTURBATIONS: Tuple[Perturbation, ...] = (
    # macro
    Perturbation("macro", "gdp_per_capita", 0.05),
    Perturbation("macro", "exchange_rate", 0.05),
    Perturbation("macro", "hourly_wage", 0.20),
    Perturbation("macro", "vsl_multiplier", 0.25, method=MortalityMethod.VSL),
    Perturbation("macro", "discount_rate", 0.20, bounds=(0.01, 0.20),
                 method=MortalityMethod.HUMAN_CAPITAL),
    # health & demographics
    Perturbation("health", "population", 0.02),
    Perturbation("health", "diarrhea_incidence_under5", 0.25),
    Perturbation("health", "diarrhea_incidence_over5", 0.25),
    Perturbation("health", "diarrhea_deaths_under5", 0.20),
    Perturbation("health", "diarrhea_deaths_over5", 0.20),
    Perturbation("health", "attribution_to_sanitation", 0.10, bounds=(0.1, 1.0)),
    # health costs
    Perturbation("health", "treatment_seeking_rate", 0.15, bounds=(0.0, 1.0)),
    Perturbation("health", "cost_outpatient", 0.30),
    Perturbation("health", "cost_inpatient", 0.30),
    # nutrition
    Perturbation("nutrition", "stunting_prevalence", 0.10, bounds=(0.0, 1.0)),
    Perturbation("nutrition", "attribution_stunting", 0.30, bounds=(0.0, 1.0)),
    Perturbation("nutrition", "wage_loss_percent", 0.20, bounds=(0.0, 1.0)),
    # access time
    Perturbation("access", "open_defecation_prevalence", 0.10, bounds=(0.0, 1.0)),
    Perturbation("access", "daily_time_for_od", 0.25),
    # carbon: high uncertainty on both the factor and the carbon price
    Perturbation("carbon", "percent_with_poor_sanitation", 0.10, bounds=(0.0, 1.0)),
    Perturbation("carbon", "emission_factor", 0.30),
    Perturbation("carbon", "social_cost_of_carbon", 0.40),
    # other
    Perturbation("other", "cholera_response_cost", 0.50),
    Perturbation("other", "funeral_cost_per_death", 0.20),
    Perturbation("other", "tourism_receipts", 0.10),
    Perturbation("other", "tourism_loss_percentage", 0.40, bounds=(0.0, 1.0)),
)


def perturb_inputs(base: ModelInputs, rng: np.random.Generator,
                   perturbations: Tuple[Perturbation, ...] = PERTURBATIONS) -> ModelInputs:
    """Draw one perturbed copy of the baseline inputs.

    Fields without a perturbation (and the mortality parameter not used by
    the baseline's method) are carried through unchanged.
    """
    changes: Dict[str, Dict[str, float]] = {}
    for p in perturbations:
        if not p.applies_to(base):
            continue
        value = getattr(getattr(base, p.section), p.name)
        changes.setdefault(p.section, {})[p.name] = p.draw(value, rng)

    sections = {name: replace(getattr(base, name), **fields_)
                for name, fields_ in changes.items()}
    return replace(base, **sections)


@dataclass(frozen=True)
class SimulationStats:
    """Summary of a Monte Carlo run.

    Attributes:
    mean: float. Mean total cost (USD)
    mean_breakdown: CostBreakdown. Mean of each category across draws
    median, p5, p95: float. Nearest-rank order statistics
    std_dev: float. Population standard deviation
    iterations: int. Number of draws
    distribution: np.ndarray. All simulated totals, sorted ascending
    """
    mean: float
    mean_breakdown: CostBreakdown
    median: float
    p5: float
    p95: float
    std_dev: float
    iterations: int
    distribution: np.ndarray

    def histogram(self, bins: int = 50) -> Tuple[np.ndarray, np.ndarray]:
        """Counts and bin edges of the simulated totals"""
        return np.histogram(self.distribution, bins=bins)

    def to_dict(self) -> Dict:
        return {
            'mean': self.mean,
            'mean_breakdown': self.mean_breakdown.to_dict(),
            'median': self.median,
            'p5': self.p5,
            'p95': self.p95,
            'std_dev': self.std_dev,
            'iterations': self.iterations,
            'distribution': self.distribution.tolist(),
        }

    def print_summary(self):
        """Print formatted simulation results."""
        print(f"MONTE CARLO RESULTS ({self.iterations:,} iterations):")
        print(f"Mean: ${self.mean:,.0f}")
        print(f"Median: ${self.median:,.0f}")
        print(f"90% interval: ${self.p5:,.0f} - ${self.p95:,.0f}")
        print(f"Std. deviation: ${self.std_dev:,.0f}")


def simulate(
        inputs: ModelInputs,
        iterations: int = DEFAULT_ITERATIONS,
        on_progress: Optional[Callable[[int], None]] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
) -> SimulationStats:
    """Run the Monte Carlo uncertainty analysis.

    Parameters:
    inputs: ModelInputs. Baseline inputs (never modified)
    iterations: int. Number of independent draws
    on_progress: callable, optional. Receives a non-decreasing integer percentage
    rng: np.random.Generator, optional. Random source; takes precedence over seed
    seed: int, optional. Seed for a fresh generator when rng is not given

    Returns:
    stats: SimulationStats
    """
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise ValueError(f"iterations must be an integer, got {iterations!r}")
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    iterations = int(iterations)
    if rng is None:
        rng = np.random.default_rng(seed)

    logger.debug("Running %d iterations (mortality method: %s)",
                 iterations, inputs.macro.mortality_method.value)

    totals = np.empty(iterations, dtype=float)
    acc_breakdown = np.zeros(len(CostBreakdown.categories()), dtype=float)
    last_percent = -1

    for i in range(iterations):
        sim_inputs = perturb_inputs(inputs, rng)
        try:
            outputs = evaluate(sim_inputs)
        except (ValueError, ArithmeticError) as e:
            raise RuntimeError(f"Simulation aborted at iteration {i}: {e}") from e

        totals[i] = outputs.total_cost_usd
        acc_breakdown += outputs.costs_usd.as_array()

        if on_progress is not None:
            percent = (i + 1) * 100 // iterations
            if percent != last_percent:
                on_progress(percent)
                last_percent = percent

    summary = summarize_sample(totals)
    stats = SimulationStats(
        mean=summary["mean"],
        mean_breakdown=CostBreakdown.from_array(acc_breakdown / iterations),
        median=summary["median"],
        p5=summary["p5"],
        p95=summary["p95"],
        std_dev=summary["std_dev"],
        iterations=iterations,
        distribution=summary["sorted"],
    )
    logger.info("Simulation complete: mean=%.0f p5=%.0f p95=%.0f",
                stats.mean, stats.p5, stats.p95)
    return stats


if __name__ == "__main__":
    from .parameters import default_inputs

    stats = simulate(default_inputs(), iterations=2000, seed=42)
    stats.print_summary()
