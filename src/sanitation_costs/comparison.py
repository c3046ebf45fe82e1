"""
===========================================================
comparison.py
Last Updated: 2026-10-17
===========================================================

Description:
    Multi-country comparison: estimate inputs for every
    supported country from its raw indicators, run the Monte
    Carlo analysis, and collect the results as a tidy pandas
    DataFrame with one row per country.

Example Usage:
    from sanitation_costs.comparison import compare_countries
    df = compare_countries(raw_by_country, iterations=2000)
    df.head(10)
-----------------------------------------------------------
License: MIT
===========================================================
"""

import logging
from typing import Callable, Dict, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .cost_model import CostBreakdown
from .countries import Country, SUPPORTED_COUNTRIES
from .estimators import estimate_inputs
from .monte_carlo import simulate

logger = logging.getLogger(__name__)

# per-category mean costs follow the summary columns, in USD
CATEGORY_COLUMNS = list(CostBreakdown.categories())

COMPARISON_COLUMNS = [
    "code", "name", "currency", "national_gdp", "mean", "median", "p5", "p95", "std_dev",
    "percent_gdp_mean", "percent_gdp_p5", "percent_gdp_p95",
] + CATEGORY_COLUMNS


def _percent_of(value: float, national_gdp: float) -> float:
    return value / national_gdp * 100 if national_gdp > 0 else 0.0


def compare_countries(
        raw_by_country: Mapping[str, Mapping[str, Optional[float]]],
        countries: Sequence[Country] = SUPPORTED_COUNTRIES,
        iterations: int = 2000,
        sort_by: str = "gdp",
        on_progress: Optional[Callable[[int], None]] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
) -> pd.DataFrame:
    """Simulate every country and rank them.

    Countries missing from raw_by_country are analysed on default
    estimates. sort_by is 'gdp' (cost as % of GDP) or 'total' (USD).
    Each row also carries the national GDP and the mean cost of every
    category in USD, which sum to the row's mean.
    """
    if sort_by not in ("gdp", "total"):
        raise ValueError("sort_by must be 'gdp' or 'total'")
    if rng is None:
        rng = np.random.default_rng(seed)

    records = []
    for i, country in enumerate(countries):
        raw: Dict[str, Optional[float]] = dict(raw_by_country.get(country.code) or {})
        if not raw:
            logger.warning("No raw indicators for %s; using default estimates", country.code)
        inputs, _ = estimate_inputs(raw, country.code, country.currency)
        stats = simulate(inputs, iterations, rng=rng)

        national_gdp = inputs.health.population * inputs.macro.gdp_per_capita
        records.append({
            "code": country.code,
            "name": country.name,
            "currency": country.currency,
            "national_gdp": national_gdp,
            "mean": stats.mean,
            "median": stats.median,
            "p5": stats.p5,
            "p95": stats.p95,
            "std_dev": stats.std_dev,
            "percent_gdp_mean": _percent_of(stats.mean, national_gdp),
            "percent_gdp_p5": _percent_of(stats.p5, national_gdp),
            "percent_gdp_p95": _percent_of(stats.p95, national_gdp),
            **stats.mean_breakdown.to_dict(),
        })
        logger.info("%s: mean cost %.2f%% of GDP", country.name, records[-1]["percent_gdp_mean"])

        if on_progress is not None:
            on_progress(round((i + 1) / len(countries) * 100))

    df = pd.DataFrame.from_records(records, columns=COMPARISON_COLUMNS)
    key = "percent_gdp_mean" if sort_by == "gdp" else "mean"
    return df.sort_values(key, ascending=False).reset_index(drop=True)
