"""
Statistics for grouped data (a frequency distribution over class intervals).

All formulas work on an ordered sequence of GroupedRow, so the same code
serves user-entered intervals and automatically binned data.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from freqstat.errors import EmptyDatasetError, InvalidIntervalError
from freqstat.descriptive.base import StatisticsEngine, register_engine
from freqstat.descriptive.measures import (
    check_variance_method,
    shortcut_variance,
    standard_deviation,
    totals_for,
    two_pass_variance,
)
from freqstat.descriptive.model import (
    Analysis,
    AnalysisContext,
    FrequencyTotals,
    GroupedDataItem,
    GroupedRow,
    StatisticalResults,
)

logger = logging.getLogger(__name__)


def validate_intervals(items: Iterable[GroupedDataItem]) -> List[GroupedDataItem]:
    """
    Check class intervals and return them sorted by lower bound.

    Raises:
        EmptyDatasetError: No intervals, or total frequency of zero.
        InvalidIntervalError: A malformed interval, or two intervals sharing
            more than a boundary point.
    """
    sorted_items = sorted(items, key=lambda item: item.lower_bound)
    if not sorted_items:
        raise EmptyDatasetError("Grouped data array is empty")

    for item in sorted_items:
        if not (math.isfinite(item.lower_bound) and math.isfinite(item.upper_bound)):
            raise InvalidIntervalError(f"Interval {item.label} has a non-finite bound")
        if not item.lower_bound < item.upper_bound:
            raise InvalidIntervalError(f"Upper bound must be greater than lower bound: {item.label}")
        if isinstance(item.frequency, bool) or item.frequency < 0 or int(item.frequency) != item.frequency:
            raise InvalidIntervalError(f"Frequency must be a non-negative integer: {item.frequency!r}")

    for previous, current in zip(sorted_items, sorted_items[1:]):
        if current.lower_bound < previous.upper_bound:
            raise InvalidIntervalError(f"Interval {current.label} overlaps with {previous.label}")

    if sum(item.frequency for item in sorted_items) == 0:
        raise EmptyDatasetError("Total frequency is zero")
    return sorted_items


def grouped_frequency_table(items: Iterable[GroupedDataItem]) -> List[GroupedRow]:
    """One row per class interval, ordered by lower bound, with running cumulative frequency."""
    rows = []
    cumulative = 0
    for item in sorted(items, key=lambda item: item.lower_bound):
        frequency = int(item.frequency)
        midpoint = item.midpoint
        cumulative += frequency
        rows.append(GroupedRow(
            label=item.label,
            lower_bound=item.lower_bound,
            upper_bound=item.upper_bound,
            frequency=frequency,
            cumulative_frequency=cumulative,
            midpoint=midpoint,
            fx=midpoint * frequency,
            x2=midpoint ** 2,
            fx2=midpoint ** 2 * frequency,
        ))
    return rows


def _totals(rows: Sequence[GroupedRow], totals: Optional[FrequencyTotals]) -> FrequencyTotals:
    totals = totals or totals_for(rows)
    if totals.total_frequency <= 0:
        raise EmptyDatasetError("Total frequency is zero")
    return totals


def grouped_mean(rows: Sequence[GroupedRow], totals: Optional[FrequencyTotals] = None) -> float:
    totals = _totals(rows, totals)
    return totals.total_fx / totals.total_frequency


def grouped_median(rows: Sequence[GroupedRow], totals: Optional[FrequencyTotals] = None) -> float:
    """
    Interpolated median: L + ((N/2 - CF) / f) * h.

    The median class is the first whose cumulative frequency reaches N/2;
    CF is the cumulative frequency before it and h its own width.
    """
    totals = _totals(rows, totals)
    median_position = totals.total_frequency / 2

    cumulative_before = 0
    for row in rows:
        if row.cumulative_frequency >= median_position:
            return row.lower_bound + ((median_position - cumulative_before) / row.frequency) * row.width
        cumulative_before = row.cumulative_frequency

    raise EmptyDatasetError("Cumulative frequency never reaches the median position")


def grouped_mode(rows: Sequence[GroupedRow]) -> Tuple[float]:
    """
    Interpolated mode: L + (d1 / (d1 + d2)) * h.

    The modal class is the first with the highest frequency. d1 and d2 are
    its excess over the preceding and following class, a missing neighbour
    counting as frequency 0. When d1 + d2 <= 0 the modal class midpoint is
    used instead.
    """
    if not rows:
        raise EmptyDatasetError("Frequency table is empty")

    modal_index = 0
    for index, row in enumerate(rows):
        if row.frequency > rows[modal_index].frequency:
            modal_index = index
    modal = rows[modal_index]

    freq_before = rows[modal_index - 1].frequency if modal_index > 0 else 0
    freq_after = rows[modal_index + 1].frequency if modal_index < len(rows) - 1 else 0
    d1 = modal.frequency - freq_before
    d2 = modal.frequency - freq_after

    if d1 + d2 <= 0:
        return (modal.midpoint,)
    return (modal.lower_bound + (d1 / (d1 + d2)) * modal.width,)


def grouped_variance(
    rows: Sequence[GroupedRow],
    totals: Optional[FrequencyTotals] = None,
    method: str = "two_pass",
) -> float:
    """Population variance over class midpoints weighted by frequency."""
    check_variance_method(method)
    totals = _totals(rows, totals)
    mean = grouped_mean(rows, totals)
    if method == "shortcut":
        return shortcut_variance(totals.total_frequency, totals.total_fx2, mean)
    return two_pass_variance([row.midpoint for row in rows], mean, [row.frequency for row in rows])


def calculate_grouped_statistics(
    rows: Sequence[GroupedRow],
    totals: Optional[FrequencyTotals] = None,
    variance_method: str = "two_pass",
) -> StatisticalResults:
    """Compute all measures from an ordered frequency table."""
    totals = _totals(rows, totals)
    variance = grouped_variance(rows, totals, variance_method)
    return StatisticalResults(
        mean=grouped_mean(rows, totals),
        median=grouped_median(rows, totals),
        mode=grouped_mode(rows),
        variance=variance,
        standard_deviation=standard_deviation(variance),
    )


@register_engine
@dataclass
class GroupedEngine(StatisticsEngine):
    """
    Analyzes user-entered class intervals.

    Output:
        - Mean from class midpoints
        - Median and mode interpolated within their own class width
        - Variance and standard deviation
        - One table row per class with column totals
    """
    engine_id: str = "grouped"

    def analyze(self, context: AnalysisContext) -> Analysis:
        """Analyze context.grouped_data."""
        items = validate_intervals(context.grouped_data)
        self._report_step(info=f"Analyzing {len(items)} class intervals", target=1, reset_counter=True)

        rows = grouped_frequency_table(items)
        totals = totals_for(rows)
        statistics = calculate_grouped_statistics(rows, totals, self.variance_method)
        self._report_step(plus_step=1)

        logger.info(f"Grouped: {len(rows)} classes, total frequency {totals.total_frequency}")

        return Analysis(engine_id=self.engine_id, statistics=statistics, rows=tuple(rows), totals=totals)
