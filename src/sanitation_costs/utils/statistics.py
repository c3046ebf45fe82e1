"""
===========================================================
statistics.py
Last Updated: 2026-10-17
===========================================================

Description:
    Reduction helpers for simulated cost samples.

    Percentiles use the nearest-rank convention: index straight
    into the sorted sample at floor(n * q), no interpolation.
    The median is the element at floor(n / 2), so for even n it
    is the upper of the two middle values, not their average.
    Standard deviation is the population form (divide by n).

Notes:
    - Biases slightly for small n; kept for compatibility with
      previously published estimates.
-----------------------------------------------------------
License: MIT
===========================================================
"""

import math
import numpy as np
from typing import Dict, Sequence


def nearest_rank(sorted_sample: np.ndarray, q: float) -> float:
    """Element at index floor(n * q) of an ascending sample"""
    n = len(sorted_sample)
    if n == 0:
        raise ValueError("cannot take a percentile of an empty sample")
    idx = min(int(math.floor(n * q)), n - 1)
    return float(sorted_sample[idx])


def population_std(sample: np.ndarray, mean: float) -> float:
    return float(math.sqrt(np.sum((sample - mean) ** 2) / len(sample)))


def summarize_sample(sample: Sequence[float]) -> Dict[str, float]:
    """Mean, median, P5, P95 and standard deviation of a sample.

    Returns the sorted sample under 'sorted' as well.
    """
    values = np.sort(np.asarray(sample, dtype=float))
    if values.size == 0:
        raise ValueError("cannot summarize an empty sample")
    mean = float(np.sum(values) / values.size)
    return {
        "mean": mean,
        "median": nearest_rank(values, 0.5),
        "p5": nearest_rank(values, 0.05),
        "p95": nearest_rank(values, 0.95),
        "std_dev": population_std(values, mean),
        "sorted": values,
    }
