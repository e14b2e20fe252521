"""
Rounding, aggregation and variance helpers shared by all engines.

Both variance formulas live here so callers choose one explicitly:

    - two_pass: sum of weighted squared deviations from the mean
    - shortcut: E[x^2] - mean^2 from the product-sum column totals
"""
from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from freqstat.descriptive.model import FrequencyTotals, GroupedRow

DEFAULT_DECIMALS = 4
VARIANCE_METHODS = ("two_pass", "shortcut")


def round_value(value: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Round a value for display."""
    return round(value, decimals)


def check_variance_method(method: str) -> str:
    if method not in VARIANCE_METHODS:
        raise ValueError(f"Unknown variance method {method!r}, expected one of {VARIANCE_METHODS}")
    return method


def column_total(rows: Iterable[GroupedRow], attr: str) -> float:
    """Sum one column of a frequency table."""
    return sum(getattr(row, attr) for row in rows)


def totals_for(rows: Sequence[GroupedRow]) -> FrequencyTotals:
    """Compute the frequency, f*x and f*x^2 column totals."""
    return FrequencyTotals(
        total_frequency=int(column_total(rows, 'frequency')),
        total_fx=column_total(rows, 'fx'),
        total_fx2=column_total(rows, 'fx2'),
    )


def shortcut_variance(total_frequency: float, total_fx2: float, mean: float) -> float:
    """
    Population variance from column totals: sum(f*x^2)/N - mean^2.

    Cancellation can leave a tiny negative residue when all values coincide;
    that is reported as 0.0.
    """
    return max(total_fx2 / total_frequency - mean ** 2, 0.0)


def two_pass_variance(values: Sequence[float], mean: float, weights: Optional[Sequence[float]] = None) -> float:
    """Population variance: sum(w * (x - mean)^2) / sum(w)."""
    if weights is None:
        return sum((x - mean) ** 2 for x in values) / len(values)
    return sum(w * (x - mean) ** 2 for x, w in zip(values, weights)) / sum(weights)


def standard_deviation(variance: float) -> float:
    return math.sqrt(variance)
