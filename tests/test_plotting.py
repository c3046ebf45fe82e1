"""
Smoke tests for the matplotlib figures (utils/plotting.py), Agg backend.
"""

import matplotlib.pyplot as plt
import pytest

from sanitation_costs.comparison import compare_countries
from sanitation_costs.cost_model import evaluate
from sanitation_costs.countries import Country
from sanitation_costs.monte_carlo import simulate
from sanitation_costs.utils.plotting import (
    plot_cost_breakdown,
    plot_country_comparison,
    plot_distribution,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_cost_breakdown_bars(baseline):
    ax = plot_cost_breakdown(evaluate(baseline).costs_usd)
    assert len(ax.patches) == 8
    assert ax.get_title() == "Cost of Inadequate Sanitation by Category"


def test_distribution_markers(baseline):
    stats = simulate(baseline, iterations=100, seed=1)
    fig, ax = plt.subplots()
    returned = plot_distribution(stats, bins=20, ax=ax)
    assert returned is ax
    assert len(ax.get_lines()) == 3
    assert "n = 100" in ax.get_title()


def test_country_comparison_plot():
    df = compare_countries(
        {"MW": {"population": 20_000_000, "gdp_per_capita": 600}},
        countries=(Country("MW", "Malawi", "MWK"),), iterations=20, seed=2)
    ax = plot_country_comparison(df, by="gdp")
    assert ax.get_ylabel() == "Cost (% of GDP)"
    ax = plot_country_comparison(df, by="total")
    assert ax.get_ylabel() == "Cost (USD)"
    with pytest.raises(ValueError):
        plot_country_comparison(df, by="median")


def test_country_comparison_stacks_categories():
    raw = {
        "MW": {"population": 20_000_000, "gdp_per_capita": 600},
        "NP": {"population": 30_000_000, "gdp_per_capita": 1300},
    }
    countries = (Country("MW", "Malawi", "MWK"), Country("NP", "Nepal", "NPR"))
    df = compare_countries(raw, countries=countries, iterations=20, seed=3)
    ax = plot_country_comparison(df, by="gdp")
    assert len(ax.patches) == 8 * len(df)
    # the top of each stack sits at the mean share of GDP
    tops = {}
    for patch in ax.patches:
        x = round(patch.get_x(), 6)
        tops[x] = max(tops.get(x, 0.0), patch.get_y() + patch.get_height())
    assert sorted(tops.values()) == pytest.approx(sorted(df["percent_gdp_mean"]), rel=1e-6)
    assert len(ax.get_legend().get_texts()) == 8
