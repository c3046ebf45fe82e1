"""
Tests for the sample reduction helpers (utils/statistics.py).
"""

import numpy as np
import pytest

from sanitation_costs.utils.statistics import nearest_rank, population_std, summarize_sample


def test_nearest_rank_indexes_without_interpolation():
    sample = np.arange(1.0, 11.0)  # 1..10
    assert nearest_rank(sample, 0.05) == 1.0   # floor(0.5) = 0
    assert nearest_rank(sample, 0.5) == 6.0    # floor(5) = 5, upper middle
    assert nearest_rank(sample, 0.95) == 10.0  # floor(9.5) = 9


def test_nearest_rank_twenty_elements():
    sample = np.arange(20.0)
    assert nearest_rank(sample, 0.05) == 1.0
    assert nearest_rank(sample, 0.95) == 19.0


def test_nearest_rank_empty():
    with pytest.raises(ValueError):
        nearest_rank(np.array([]), 0.5)


def test_population_std_divides_by_n():
    sample = np.array([2, 4, 4, 4, 5, 5, 7, 9], dtype=float)
    assert population_std(sample, 5.0) == pytest.approx(2.0)


def test_summarize_sorts_and_reduces():
    summary = summarize_sample([5.0, 1.0, 3.0, 2.0, 4.0])
    assert list(summary["sorted"]) == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert summary["mean"] == pytest.approx(3.0)
    assert summary["median"] == 3.0
    assert summary["p5"] == 1.0
    assert summary["p95"] == 5.0
    assert summary["std_dev"] == pytest.approx(np.sqrt(2.0))


def test_summarize_single_value():
    summary = summarize_sample([42.0])
    assert summary["mean"] == summary["median"] == summary["p5"] == summary["p95"] == 42.0
    assert summary["std_dev"] == 0.0


def test_summarize_empty():
    with pytest.raises(ValueError):
        summarize_sample([])
