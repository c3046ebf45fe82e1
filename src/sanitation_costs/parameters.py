"""
===============================================================================
parameters.py
Last Updated: 2026-10-17
===============================================================================
Model Inputs for the Economic Cost of Inadequate Sanitation

This module contains the complete input set for the sanitation cost model,
grouped into six categories (macro, health, nutrition, access time, carbon,
and other costs). Each category is an immutable dataclass that validates its
own domain on construction, so the cost evaluator never sees an
out-of-range value.

Default values describe a hypothetical Malawi baseline, sourced from:
    - WHO / World Bank WASH attributable burden estimates
    - Hutton & Chase (2016): Economic cost of inadequate sanitation
    - IPCC 2019 Refinement (latrine methane emissions)
    - SCARE tool (containment + emptying emissions)
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

import math
from dataclasses import dataclass, field, fields, asdict, replace
from enum import Enum
from typing import Dict, Optional, Union


class MortalityMethod(str, Enum):
    """Valuation regime for a premature death"""
    HUMAN_CAPITAL = "humanCapital"  # discounted foregone GDP contribution
    VSL = "vsl"                     # value of statistical life (willingness to pay)


class EmissionFactorSource(str, Enum):
    """Where the carbon emission factor came from"""
    IPCC = "IPCC"
    SCARE = "SCARE"
    CUSTOM = "Custom"


# kg CO2e per person per year
EMISSION_PRESETS: Dict[EmissionFactorSource, float] = {
    EmissionFactorSource.IPCC: 35.0,   # pit latrine / septic in warm climate (IPCC 2019)
    EmissionFactorSource.SCARE: 52.0,  # containment + emptying (SCARE tool)
}


def _check_finite(name: str, value: float):
    # NaN compares False against every bound
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def _check_fraction(name: str, value: float):
    _check_finite(name, value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must lie in [0, 1], got {value}")


def _check_non_negative(name: str, value: float):
    _check_finite(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_positive(name: str, value: float):
    _check_finite(name, value)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class MacroInputs:
    """Macroeconomic context of the analysis.

    Attributes:
    analysis_year: int. Reference year of the estimate
    currency_code: str. ISO code of the local currency (e.g. 'MWK')
    exchange_rate: float. Local currency units per USD
    gdp_per_capita: float. USD
    discount_rate: float. Annual discount rate, fraction in [0, 1)
    hourly_wage: float. USD
    working_days_per_year: int. Days worked per year
    mortality_method: MortalityMethod. 'humanCapital' or 'vsl'
    vsl_multiplier: float. VSL as a multiple of GDP per capita
    """
    analysis_year: int = 2023
    currency_code: str = "MWK"
    exchange_rate: float = 1700.0
    gdp_per_capita: float = 600.0
    discount_rate: float = 0.10
    hourly_wage: float = 0.50
    working_days_per_year: int = 260
    mortality_method: MortalityMethod = MortalityMethod.HUMAN_CAPITAL
    vsl_multiplier: float = 70.0

    def __post_init__(self):
        # accept the plain string form ('humanCapital' / 'vsl')
        try:
            method = MortalityMethod(self.mortality_method)
        except ValueError:
            raise ValueError(f"unknown mortality method: {self.mortality_method!r}") from None
        object.__setattr__(self, "mortality_method", method)

        _check_positive("exchange_rate", self.exchange_rate)
        _check_positive("gdp_per_capita", self.gdp_per_capita)
        _check_positive("hourly_wage", self.hourly_wage)
        _check_positive("vsl_multiplier", self.vsl_multiplier)
        _check_non_negative("working_days_per_year", self.working_days_per_year)
        if not 0.0 <= self.discount_rate < 1.0:
            raise ValueError(f"discount_rate must lie in [0, 1), got {self.discount_rate}")


@dataclass(frozen=True)
class HealthInputs:
    """Diarrheal disease burden and treatment costs.

    Incidence is in cases per person per year; deaths are annual counts;
    unit costs are USD per treated case.
    """
    population: float = 20_000_000
    diarrhea_incidence_under5: float = 3.5
    diarrhea_incidence_over5: float = 0.5
    diarrhea_deaths_under5: float = 4500
    diarrhea_deaths_over5: float = 1500
    attribution_to_sanitation: float = 0.88  # WHO attributable fraction
    treatment_seeking_rate: float = 0.60
    cost_outpatient: float = 5.0
    cost_inpatient: float = 40.0

    def __post_init__(self):
        _check_positive("population", self.population)
        for name in ("diarrhea_incidence_under5", "diarrhea_incidence_over5",
                     "diarrhea_deaths_under5", "diarrhea_deaths_over5",
                     "cost_outpatient", "cost_inpatient"):
            _check_non_negative(name, getattr(self, name))
        _check_fraction("attribution_to_sanitation", self.attribution_to_sanitation)
        _check_fraction("treatment_seeking_rate", self.treatment_seeking_rate)


@dataclass(frozen=True)
class NutritionInputs:
    """Stunting burden in children under five"""
    stunting_prevalence: float = 0.30   # aligned with broader LDC averages
    attribution_stunting: float = 0.50  # share linked to WASH / environment
    wage_loss_percent: float = 0.10     # future wage penalty per stunted child

    def __post_init__(self):
        for f in fields(self):
            _check_fraction(f.name, getattr(self, f.name))


@dataclass(frozen=True)
class AccessInputs:
    open_defecation_prevalence: float = 0.06
    daily_time_for_od: float = 0.5  # hours per person per day

    def __post_init__(self):
        _check_fraction("open_defecation_prevalence", self.open_defecation_prevalence)
        _check_non_negative("daily_time_for_od", self.daily_time_for_od)


@dataclass(frozen=True)
class CarbonInputs:
    """Greenhouse gas emissions from poorly managed sanitation.

    Attributes:
    percent_with_poor_sanitation: float. Population share using unimproved facilities or OD
    emission_factor: float. kg CO2e per person per year
    emission_factor_source: EmissionFactorSource. IPCC, SCARE or Custom
    social_cost_of_carbon: float. USD per metric ton CO2e
    """
    percent_with_poor_sanitation: float = 0.60
    emission_factor: float = EMISSION_PRESETS[EmissionFactorSource.IPCC]
    emission_factor_source: EmissionFactorSource = EmissionFactorSource.IPCC
    social_cost_of_carbon: float = 100.0

    def __post_init__(self):
        try:
            source = EmissionFactorSource(self.emission_factor_source)
        except ValueError:
            raise ValueError(f"unknown emission factor source: {self.emission_factor_source!r}") from None
        object.__setattr__(self, "emission_factor_source", source)

        _check_fraction("percent_with_poor_sanitation", self.percent_with_poor_sanitation)
        _check_non_negative("emission_factor", self.emission_factor)
        _check_non_negative("social_cost_of_carbon", self.social_cost_of_carbon)

    @classmethod
    def from_preset(cls,
                    source: Union[EmissionFactorSource, str],
                    percent_with_poor_sanitation: float = 0.60,
                    social_cost_of_carbon: float = 100.0) -> "CarbonInputs":
        """Build a carbon section using one of the literature emission factors"""
        source = EmissionFactorSource(source)
        if source not in EMISSION_PRESETS:
            raise ValueError("custom emission factors have no preset; pass emission_factor directly")
        return cls(
            percent_with_poor_sanitation=percent_with_poor_sanitation,
            emission_factor=EMISSION_PRESETS[source],
            emission_factor_source=source,
            social_cost_of_carbon=social_cost_of_carbon,
        )


@dataclass(frozen=True)
class OtherCostInputs:
    cholera_response_cost: float = 2_000_000.0
    funeral_cost_per_death: float = 200.0
    tourism_receipts: float = 50_000_000.0
    tourism_loss_percentage: float = 0.05

    def __post_init__(self):
        _check_non_negative("cholera_response_cost", self.cholera_response_cost)
        _check_non_negative("funeral_cost_per_death", self.funeral_cost_per_death)
        _check_non_negative("tourism_receipts", self.tourism_receipts)
        _check_fraction("tourism_loss_percentage", self.tourism_loss_percentage)


_SECTIONS = {
    "macro": MacroInputs,
    "health": HealthInputs,
    "nutrition": NutritionInputs,
    "access": AccessInputs,
    "carbon": CarbonInputs,
    "other": OtherCostInputs,
}


@dataclass(frozen=True)
class ModelInputs:
    """Complete input set for one country analysis.

    A record of six immutable sections. Instances are never mutated; use
    `replace()` to derive a modified copy.
    """
    macro: MacroInputs = field(default_factory=MacroInputs)
    health: HealthInputs = field(default_factory=HealthInputs)
    nutrition: NutritionInputs = field(default_factory=NutritionInputs)
    access: AccessInputs = field(default_factory=AccessInputs)
    carbon: CarbonInputs = field(default_factory=CarbonInputs)
    other: OtherCostInputs = field(default_factory=OtherCostInputs)

    def replace(self, section: Optional[str] = None, **changes) -> "ModelInputs":
        """Return a copy with fields of one section (or whole sections) changed.

        Examples:
            inputs.replace("macro", mortality_method="vsl")
            inputs.replace(carbon=CarbonInputs.from_preset("SCARE"))
        """
        if section is None:
            return replace(self, **changes)
        if section not in _SECTIONS:
            raise ValueError(f"unknown input section: {section!r}")
        updated = replace(getattr(self, section), **changes)
        return replace(self, **{section: updated})

    def to_dict(self) -> Dict[str, Dict]:
        """Nested dictionary form; enums are written as their string values"""
        out = asdict(self)
        out["macro"]["mortality_method"] = self.macro.mortality_method.value
        out["carbon"]["emission_factor_source"] = self.carbon.emission_factor_source.value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Dict]) -> "ModelInputs":
        """Inverse of to_dict(); missing sections take their defaults"""
        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise ValueError(f"unknown input sections: {sorted(unknown)}")
        return cls(**{name: section_cls(**data[name])
                      for name, section_cls in _SECTIONS.items() if name in data})

    def print_summary(self):
        """Print input summary for documentation."""
        m, h = self.macro, self.health
        print("SANITATION COST MODEL INPUTS:")
        print("\n--- MACRO ---")
        print(f"Analysis year: {m.analysis_year}")
        print(f"GDP per capita: ${m.gdp_per_capita:,.0f}")
        print(f"Exchange rate: {m.exchange_rate:,.2f} {m.currency_code}/USD")
        print(f"Discount rate: {m.discount_rate * 100:.1f}%")
        print(f"Mortality valuation: {m.mortality_method.value}")

        print("\n--- HEALTH ---")
        print(f"Population: {h.population:,.0f}")
        print(f"Diarrhea incidence (U5 / O5): {h.diarrhea_incidence_under5:.2f} / {h.diarrhea_incidence_over5:.2f}")
        print(f"Diarrhea deaths (U5 / O5): {h.diarrhea_deaths_under5:,.0f} / {h.diarrhea_deaths_over5:,.0f}")
        print(f"Attributable to sanitation: {h.attribution_to_sanitation * 100:.0f}%")

        print("\n--- CARBON ---")
        print(f"Emission factor: {self.carbon.emission_factor:.1f} kg CO2e/person/yr "
              f"({self.carbon.emission_factor_source.value})")
        print(f"Social cost of carbon: ${self.carbon.social_cost_of_carbon:,.0f}/t")


def default_inputs() -> ModelInputs:
    """Hypothetical Malawi baseline"""
    return ModelInputs()


# Alternative input sets for sensitivity analysis
def create_vsl_inputs(vsl_multiplier: float = 70.0) -> ModelInputs:
    """Baseline valued with the value of statistical life"""
    return default_inputs().replace(
        "macro", mortality_method=MortalityMethod.VSL, vsl_multiplier=vsl_multiplier
    )


def create_scare_emissions_inputs() -> ModelInputs:
    """Baseline with the higher SCARE emission factor"""
    base = default_inputs()
    return base.replace(carbon=CarbonInputs.from_preset(
        EmissionFactorSource.SCARE,
        percent_with_poor_sanitation=base.carbon.percent_with_poor_sanitation,
        social_cost_of_carbon=base.carbon.social_cost_of_carbon,
    ))


def create_custom_emissions_inputs(emission_factor: float) -> ModelInputs:
    """Baseline with a user-supplied emission factor (kg CO2e/person/yr)"""
    return default_inputs().replace(
        "carbon", emission_factor=emission_factor,
        emission_factor_source=EmissionFactorSource.CUSTOM,
    )


if __name__ == "__main__":
    inputs = default_inputs()
    inputs.print_summary()

    print("\nInput dictionary:")
    import pprint
    pprint.pprint(inputs.to_dict())
