"""
Tests for the input estimator (estimators.py).

1.  Empty indicator bag -> defaults + warning
2.  WASH mortality path vs. epidemiological fallback
3.  Income-band heuristics
4.  Observed indicators override heuristics, with provenance
5.  Half-up rounding of ties
"""

import warnings

import pytest

from sanitation_costs.cost_model import evaluate
from sanitation_costs.estimators import _round_half_up, estimate_inputs
from sanitation_costs.parameters import EmissionFactorSource, MortalityMethod


def _malawi_raw():
    return {
        "population": 20_000_000,
        "gdp_per_capita": 600,
        "exchange_rate": 1700,
        "open_defecation": 6,
        "stunting_prevalence": 37,
        "basic_sanitation": 25,
        "tourism_receipts": 40_000_000,
        "mortality_under5_rate": 42,
        "birth_rate": 34,
    }


def test_empty_bag_uses_defaults():
    with pytest.warns(UserWarning, match="No indicator data"):
        inputs, sources = estimate_inputs({}, "XX", "USD", analysis_year=2024)

    assert inputs.macro.gdp_per_capita == 1000
    assert inputs.macro.exchange_rate == 1.0
    assert inputs.macro.hourly_wage == pytest.approx(1000 / 2080 * 0.8)
    assert inputs.macro.analysis_year == 2024
    assert inputs.macro.mortality_method is MortalityMethod.HUMAN_CAPITAL
    assert inputs.health.population == 10_000_000

    # 250k births * 40/1000 * 9%
    assert inputs.health.diarrhea_deaths_under5 == 900
    assert inputs.health.diarrhea_deaths_over5 == 315
    assert inputs.health.attribution_to_sanitation == 0.88

    assert inputs.health.diarrhea_incidence_under5 == 3.5
    assert inputs.health.diarrhea_incidence_over5 == pytest.approx(0.525, abs=0.01)
    assert inputs.health.treatment_seeking_rate == pytest.approx(0.44)
    assert inputs.health.cost_outpatient == 5.0
    assert inputs.health.cost_inpatient == 40.0

    # GDPpc of exactly 1000 falls in the middle income band
    assert inputs.nutrition.stunting_prevalence == 0.25
    assert inputs.access.open_defecation_prevalence == 0.05
    assert inputs.carbon.percent_with_poor_sanitation == pytest.approx(0.35)
    assert inputs.carbon.emission_factor_source is EmissionFactorSource.IPCC
    assert inputs.other.tourism_receipts == pytest.approx(200_000_000)
    assert inputs.other.cholera_response_cost == 2_000_000
    assert inputs.other.funeral_cost_per_death == 200

    assert sources["population"] == "Default Estimate"
    assert sources["open_defecation_prevalence"] == "Default (5%)"


def test_observed_indicators_used():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        inputs, sources = estimate_inputs(_malawi_raw(), "MW", "MWK")

    assert inputs.macro.currency_code == "MWK"
    assert inputs.macro.exchange_rate == 1700
    assert inputs.health.population == 20_000_000
    assert inputs.nutrition.stunting_prevalence == pytest.approx(0.37)
    assert inputs.access.open_defecation_prevalence == pytest.approx(0.06)
    assert inputs.carbon.percent_with_poor_sanitation == pytest.approx(0.75)
    assert inputs.other.tourism_receipts == 40_000_000

    assert sources["population"] == "Data: World Bank"
    assert sources["stunting_prevalence"].startswith("Data: World Bank")
    assert sources["diarrhea_deaths_under5"].startswith("Est. derived from WB Mortality Data")


def test_wash_mortality_path():
    raw = dict(_malawi_raw(), wash_mortality=30)
    inputs, sources = estimate_inputs(raw, "MW", "MWK")
    # 30 per 100k of 20M = 6000 deaths, split 70/30
    assert inputs.health.diarrhea_deaths_under5 == 4200
    assert inputs.health.diarrhea_deaths_over5 == 1800
    assert inputs.health.attribution_to_sanitation == 1.0
    assert sources["attribution_to_sanitation"] == "Included in source data"


def test_income_bands():
    middle, _ = estimate_inputs({"gdp_per_capita": 5000}, "XX", "USD")
    assert middle.health.diarrhea_incidence_under5 == 1.5
    assert middle.nutrition.stunting_prevalence == 0.10

    rich, _ = estimate_inputs({"gdp_per_capita": 20000}, "XX", "USD")
    assert rich.health.diarrhea_incidence_under5 == 0.5
    assert rich.health.treatment_seeking_rate == 0.95

    poor, _ = estimate_inputs({"gdp_per_capita": 400}, "XX", "USD")
    assert poor.nutrition.stunting_prevalence == 0.40
    assert poor.health.treatment_seeking_rate == pytest.approx(0.42)
    assert poor.health.cost_outpatient == 2.0
    assert poor.health.cost_inpatient == 16.0


def test_prevalence_and_health_expenditure():
    inputs, sources = estimate_inputs(
        {"gdp_per_capita": 600, "diarrhea_prevalence": 20, "health_expenditure": 40},
        "XX", "USD")
    assert inputs.health.diarrhea_incidence_under5 == 5.0
    assert inputs.health.cost_outpatient == 4.0
    assert inputs.health.cost_inpatient == 32.0
    assert sources["cost_outpatient"] == "Data: World Bank (Health Exp)"


def test_zero_counts_as_missing():
    inputs, sources = estimate_inputs({"gdp_per_capita": 600, "population": 0}, "XX", "USD")
    assert inputs.health.population == 10_000_000
    assert sources["population"] == "Default Estimate"


def test_estimated_inputs_evaluate():
    inputs, _ = estimate_inputs(_malawi_raw(), "MW", "MWK")
    out = evaluate(inputs)
    assert out.total_cost_usd > 0
    assert 0 < out.percent_gdp < 100


@pytest.mark.parametrize("value, ndigits, expected", [
    (2.5, 0, 3),
    (10.5, 0, 11),
    (0.5, 0, 1),
    (4.4999, 0, 4),
    (0.125, 2, 0.13),
    (0.375, 2, 0.38),
    (1.0, 2, 1.0),
])
def test_ties_round_half_up(value, ndigits, expected):
    result = _round_half_up(value, ndigits)
    assert result == expected
    assert isinstance(result, int if ndigits == 0 else float)


def test_estimated_deaths_are_integers():
    inputs, _ = estimate_inputs(_malawi_raw(), "MW", "MWK")
    assert isinstance(inputs.health.diarrhea_deaths_under5, int)
    assert isinstance(inputs.health.diarrhea_deaths_over5, int)
