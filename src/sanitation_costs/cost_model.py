"""
===============================================================================
cost_model.py
Last Updated: 2026-10-17
===============================================================================
Deterministic cost model for inadequate sanitation

This module evaluates the annual economic cost a country bears from poor
sanitation, decomposed into eight categories:
- Health care (treatment of attributable diarrheal cases)
- Productivity (workdays lost to illness)
- Mortality (human capital approach or value of statistical life)
- Nutrition (lifetime wage loss from stunting, NPV)
- Access time (time spent reaching open defecation sites)
- Carbon (GHG emissions valued at the social cost of carbon)
- Cholera response and funerals
- Tourism (reputational loss of receipts)

evaluate() is a pure function: no randomness, no I/O, and the inputs are
never modified. It is used directly for the best estimate and repeatedly by
the Monte Carlo engine.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

from dataclasses import dataclass, fields, asdict
from typing import Dict

import numpy as np
import pandas as pd

from .parameters import ModelInputs, MortalityMethod

# population structure
UNDER5_SHARE = 0.15
OVER5_SHARE = 0.85

# treatment case mix
OUTPATIENT_SHARE = 0.9
INPATIENT_SHARE = 0.1

DAYS_LOST_PER_EPISODE = 2
HOURS_PER_DAY = 8
LABOR_SUBSTITUTION = 0.5   # share of nominal wage counted as a true loss
ACCESS_TIME_VALUE = 0.3    # time valued at 30% of the wage

MORTALITY_YEARS_LOST = 20
STUNTING_WORK_START = 15   # years until a stunted child starts working
STUNTING_WORK_YEARS = 40
WORKING_DAYS_STUNTING = 260


@dataclass(frozen=True)
class CostBreakdown:
    """Annual cost by category (one currency)"""
    health_care: float
    productivity: float
    mortality: float
    nutrition: float
    access_time: float
    carbon: float
    cholera_and_funerals: float
    tourism: float

    @classmethod
    def categories(cls):
        return tuple(f.name for f in fields(cls))

    @property
    def total(self) -> float:
        return (self.health_care + self.productivity + self.mortality + self.nutrition
                + self.access_time + self.carbon + self.cholera_and_funerals + self.tourism)

    def scale(self, factor: float) -> "CostBreakdown":
        """Multiply every category by the same factor (currency conversion)"""
        return CostBreakdown(**{k: v * factor for k, v in asdict(self).items()})

    def as_array(self) -> np.ndarray:
        return np.array([getattr(self, k) for k in self.categories()], dtype=float)

    @classmethod
    def from_array(cls, values) -> "CostBreakdown":
        return cls(**{k: float(v) for k, v in zip(cls.categories(), values)})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def to_series(self) -> pd.Series:
        return pd.Series(self.to_dict(), name="cost")


@dataclass(frozen=True)
class ModelOutputs:
    costs_usd: CostBreakdown
    costs_local: CostBreakdown
    total_cost_usd: float
    total_cost_local: float
    percent_gdp: float
    currency_code: str

    def to_dict(self) -> Dict:
        return {
            'costs_usd': self.costs_usd.to_dict(),
            'costs_local': self.costs_local.to_dict(),
            'total_cost_usd': self.total_cost_usd,
            'total_cost_local': self.total_cost_local,
            'percent_gdp': self.percent_gdp,
            'currency_code': self.currency_code,
        }

    def print_summary(self):
        """Print formatted cost results."""
        print("ECONOMIC COST OF INADEQUATE SANITATION:")
        print(f"\n--- TOTAL ---")
        print(f"USD: ${self.total_cost_usd:,.0f}")
        print(f"{self.currency_code}: {self.total_cost_local:,.0f}")
        print(f"Share of GDP: {self.percent_gdp:.2f}%")

        print(f"\n--- BREAKDOWN (USD) ---")
        for name, value in self.costs_usd.to_dict().items():
            share = value / self.total_cost_usd * 100 if self.total_cost_usd else 0.0
            print(f"{name.replace('_', ' ').title():<22} ${value:>16,.0f}  ({share:5.1f}%)")


def mortality_multiplier(gdp_per_capita: float, discount_rate: float,
                         years_lost: int = MORTALITY_YEARS_LOST) -> float:
    """Value of one death under the human capital approach.

    NPV of the GDP contribution foregone over `years_lost` years, discounted
    from year 0. Nothing is counted past the horizon.
    """
    multiplier = 0.0
    for t in range(years_lost):
        multiplier += gdp_per_capita / (1 + discount_rate) ** t
    return multiplier


def stunting_cost_per_child(hourly_wage: float, wage_loss_percent: float,
                            discount_rate: float) -> float:
    """NPV of the future income deficit of one stunted child.

    Incidence-based human capital approach: the child starts working in
    STUNTING_WORK_START years and works for STUNTING_WORK_YEARS years; the
    discount applies from now (year 0) to year t.
    """
    annual_wage = hourly_wage * HOURS_PER_DAY * WORKING_DAYS_STUNTING
    annual_loss = annual_wage * wage_loss_percent

    npv = 0.0
    for t in range(STUNTING_WORK_START, STUNTING_WORK_START + STUNTING_WORK_YEARS):
        npv += annual_loss / (1 + discount_rate) ** t
    return npv


def evaluate(inputs: ModelInputs) -> ModelOutputs:
    """Evaluate the deterministic cost model for one complete input set.

    Parameters:
    inputs: ModelInputs. Validated input set (never modified)

    Returns:
    outputs: ModelOutputs. Breakdown in USD and local currency, totals and GDP share
    """
    macro, health, nutrition = inputs.macro, inputs.health, inputs.nutrition
    access, carbon, other = inputs.access, inputs.carbon, inputs.other

    # health care
    total_cases = (health.diarrhea_incidence_under5 * (health.population * UNDER5_SHARE)
                   + health.diarrhea_incidence_over5 * (health.population * OVER5_SHARE))
    attributable_cases = total_cases * health.attribution_to_sanitation
    treated_cases = attributable_cases * health.treatment_seeking_rate
    average_treatment_cost = (health.cost_outpatient * OUTPATIENT_SHARE
                              + health.cost_inpatient * INPATIENT_SHARE)
    health_care = treated_cases * average_treatment_cost

    # productivity
    daily_wage = macro.hourly_wage * HOURS_PER_DAY
    productivity = attributable_cases * DAYS_LOST_PER_EPISODE * daily_wage * LABOR_SUBSTITUTION

    # mortality
    total_deaths = health.diarrhea_deaths_under5 + health.diarrhea_deaths_over5
    attributable_deaths = total_deaths * health.attribution_to_sanitation
    method = macro.mortality_method
    if method is MortalityMethod.HUMAN_CAPITAL:
        value_per_death = mortality_multiplier(macro.gdp_per_capita, macro.discount_rate)
    elif method is MortalityMethod.VSL:
        # already a present willingness-to-pay figure, no discounting
        value_per_death = macro.gdp_per_capita * macro.vsl_multiplier
    else:
        raise ValueError(f"unhandled mortality method: {method!r}")
    mortality = attributable_deaths * value_per_death

    # nutrition: one-year cohort of the under-5 population
    annual_cohort = health.population * UNDER5_SHARE / 5
    new_stunted = annual_cohort * nutrition.stunting_prevalence
    attributable_stunted = new_stunted * nutrition.attribution_stunting
    nutrition_cost = attributable_stunted * stunting_cost_per_child(
        macro.hourly_wage, nutrition.wage_loss_percent, macro.discount_rate
    )

    # access time
    od_population = health.population * access.open_defecation_prevalence
    access_time = (od_population * 365 * access.daily_time_for_od
                   * (macro.hourly_wage * ACCESS_TIME_VALUE))

    # carbon: SCC is already the present value of a ton emitted today
    emissions_tons = health.population * carbon.percent_with_poor_sanitation * carbon.emission_factor / 1000
    carbon_cost = emissions_tons * carbon.social_cost_of_carbon

    cholera_and_funerals = other.cholera_response_cost + attributable_deaths * other.funeral_cost_per_death
    tourism = other.tourism_receipts * other.tourism_loss_percentage

    costs_usd = CostBreakdown(
        health_care=health_care,
        productivity=productivity,
        mortality=mortality,
        nutrition=nutrition_cost,
        access_time=access_time,
        carbon=carbon_cost,
        cholera_and_funerals=cholera_and_funerals,
        tourism=tourism,
    )
    total_cost_usd = costs_usd.total

    national_gdp = health.population * macro.gdp_per_capita
    percent_gdp = total_cost_usd / national_gdp * 100 if national_gdp > 0 else 0.0

    return ModelOutputs(
        costs_usd=costs_usd,
        costs_local=costs_usd.scale(macro.exchange_rate),
        total_cost_usd=total_cost_usd,
        total_cost_local=total_cost_usd * macro.exchange_rate,
        percent_gdp=percent_gdp,
        currency_code=macro.currency_code,
    )


if __name__ == "__main__":
    from .parameters import default_inputs, create_vsl_inputs

    print("Testing human capital valuation...")
    evaluate(default_inputs()).print_summary()

    print("\nTesting VSL valuation...")
    evaluate(create_vsl_inputs()).print_summary()
