"""
Statistics for raw (ungrouped) observations.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import List, Optional, Sequence, Tuple

from freqstat.errors import EmptyDatasetError
from freqstat.descriptive.base import StatisticsEngine, register_engine
from freqstat.descriptive.measures import (
    check_variance_method,
    shortcut_variance,
    standard_deviation,
    two_pass_variance,
)
from freqstat.descriptive.model import Analysis, AnalysisContext, StatisticalResults, UngroupedRow

logger = logging.getLogger(__name__)


def _require_data(data: Sequence[float]) -> None:
    if len(data) == 0:
        raise EmptyDatasetError("Data array is empty")


def ungrouped_mean(data: Sequence[float]) -> float:
    _require_data(data)
    return sum(data) / len(data)


def ungrouped_median(data: Sequence[float]) -> float:
    """Middle value of the sorted data, or the average of the two middle values."""
    _require_data(data)
    sorted_data = sorted(data)
    middle = len(sorted_data) // 2
    if len(sorted_data) % 2 == 0:
        return (sorted_data[middle - 1] + sorted_data[middle]) / 2
    return sorted_data[middle]


def ungrouped_mode(data: Sequence[float]) -> Optional[Tuple[float, ...]]:
    """
    All values sharing the highest count, ascending.

    Returns None when every value occurs once.
    """
    _require_data(data)
    counts = Counter(data)
    max_count = max(counts.values())
    if max_count == 1:
        return None
    return tuple(sorted(value for value, count in counts.items() if count == max_count))


def ungrouped_variance(data: Sequence[float], method: str = "two_pass") -> float:
    """Population variance (divisor n)."""
    check_variance_method(method)
    mean = ungrouped_mean(data)
    if method == "shortcut":
        return shortcut_variance(len(data), sum(x * x for x in data), mean)
    return two_pass_variance(data, mean)


def calculate_ungrouped_statistics(data: Sequence[float], variance_method: str = "two_pass") -> StatisticalResults:
    """Compute mean, median, mode, variance and standard deviation of raw data."""
    _require_data(data)
    variance = ungrouped_variance(data, variance_method)
    return StatisticalResults(
        mean=ungrouped_mean(data),
        median=ungrouped_median(data),
        mode=ungrouped_mode(data),
        variance=variance,
        standard_deviation=standard_deviation(variance),
    )


def ungrouped_frequency_table(data: Sequence[float]) -> List[UngroupedRow]:
    """One row per observation in ascending order, without aggregation."""
    return [UngroupedRow(value=value, x2=value ** 2) for value in sorted(data)]


@register_engine
@dataclass
class UngroupedEngine(StatisticsEngine):
    """
    Analyzes raw observations directly.

    Output:
        - Mean, median, mode (None when all values are unique)
        - Population variance and standard deviation
        - One table row per sorted observation
    """
    engine_id: str = "ungrouped"

    def analyze(self, context: AnalysisContext) -> Analysis:
        """Analyze context.data."""
        data = list(context.data)
        self._report_step(info=f"Analyzing {len(data)} ungrouped values", target=1, reset_counter=True)
        statistics = calculate_ungrouped_statistics(data, self.variance_method)
        rows = ungrouped_frequency_table(data)
        self._report_step(plus_step=1)

        logger.info(f"Ungrouped: {len(data)} values, mean {statistics.mean}")

        return Analysis(engine_id=self.engine_id, statistics=statistics, rows=tuple(rows))
