"""
===========================================================
plotting.py
Last Updated: 2026-10-17
===========================================================
Visualization functions for sanitation cost results.

Cost breakdown bars, the simulated distribution of total
cost, and the ranked multi-country comparison.
"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Optional
from matplotlib.axes import Axes

from ..cost_model import CostBreakdown
from ..monte_carlo import SimulationStats

COLOR_PALETTE = {
    'health_care': '#1CABE2',
    'productivity': '#FFC20E',
    'mortality': '#E2231A',
    'nutrition': '#84BD00',
    'access_time': '#00833D',
    'cholera_and_funerals': '#80276C',
    'tourism': '#004C97',
    'carbon': '#475569',
}


def plot_cost_breakdown(breakdown: CostBreakdown,
                        ax: Optional[Axes] = None,
                        show: bool = False,
                        title: Optional[str] = None) -> Axes:
    """
    Horizontal bar chart of cost by category.

    Parameters
    ----------
    breakdown : CostBreakdown
        Costs to plot (USD or local currency)
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure
    show : bool
        Whether to display the plot immediately
    title : str, optional
        Custom title

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    series = breakdown.to_series().sort_values()
    labels = [k.replace('_', ' ').title() for k in series.index]
    colors = [COLOR_PALETTE[k] for k in series.index]
    ax.barh(labels, series.to_numpy(), color=colors)

    ax.set_xlabel('Annual cost', fontsize=12)
    ax.set_title(title if title else 'Cost of Inadequate Sanitation by Category', fontsize=14)
    ax.grid(True, axis='x', alpha=0.3)

    if show:
        plt.show()
    return ax


def plot_distribution(stats: SimulationStats,
                      bins: int = 50,
                      ax: Optional[Axes] = None,
                      show: bool = False) -> Axes:
    """Histogram of simulated totals with P5 / median / P95 markers"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4.5))

    ax.hist(stats.distribution, bins=bins, color='#1CABE2', alpha=0.8)
    ax.axvline(stats.p5, color='k', linestyle='--', lw=1.5, label='P5')
    ax.axvline(stats.median, color='#E2231A', lw=2, label='Median')
    ax.axvline(stats.p95, color='k', linestyle='--', lw=1.5, label='P95')

    ax.set_xlabel('Total annual cost (USD)', fontsize=12)
    ax.set_ylabel('Frequency', fontsize=12)
    ax.set_title(f'Monte Carlo Distribution (n = {stats.iterations:,})', fontsize=14)
    ax.legend()
    ax.grid(alpha=0.25)

    if show:
        plt.show()
    return ax


def plot_country_comparison(df: pd.DataFrame,
                            by: str = 'gdp',
                            ax: Optional[Axes] = None,
                            show: bool = False) -> Axes:
    """
    Ranked stacked bar chart of countries by cost category,
    with P5-P95 error bars on the mean total.

    Parameters
    ----------
    df : pd.DataFrame
        Output of compare_countries (category columns in USD)
    by : str
        'gdp' plots % of national GDP, 'total' plots USD
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure
    show : bool
        Whether to display the plot immediately

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if by == 'gdp':
        gdp = df['national_gdp'].to_numpy(dtype=float)
        scale = np.divide(100.0, gdp, out=np.zeros_like(gdp), where=gdp > 0)
        ylabel = 'Cost (% of GDP)'
    elif by == 'total':
        scale = np.ones(len(df))
        ylabel = 'Cost (USD)'
    else:
        raise ValueError("by must be 'gdp' or 'total'")

    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 5))

    names = df['name'].to_numpy()
    bottom = np.zeros(len(df))
    for category in CostBreakdown.categories():
        heights = df[category].to_numpy(dtype=float) * scale
        ax.bar(names, heights, bottom=bottom, color=COLOR_PALETTE[category],
               label=category.replace('_', ' ').title())
        bottom = bottom + heights

    mean = df['mean'].to_numpy(dtype=float) * scale
    low = df['p5'].to_numpy(dtype=float) * scale
    high = df['p95'].to_numpy(dtype=float) * scale
    # error bars must be non-negative distances from the mean
    yerr = np.vstack([np.clip(mean - low, 0, None), np.clip(high - mean, 0, None)])
    ax.errorbar(names, mean, yerr=yerr, fmt='none', ecolor='k', capsize=3)

    ax.set_ylabel(ylabel, fontsize=12)
    ax.tick_params(axis='x', labelrotation=90)
    ax.grid(True, axis='y', alpha=0.3)
    ax.legend(fontsize=8)

    if show:
        plt.show()
    return ax
