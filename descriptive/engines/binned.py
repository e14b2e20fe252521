"""
Automatic class intervals for raw data (Sturges' Rule) and the frequency
distribution built from them.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import List, Sequence

from freqstat.errors import DegenerateClassWidthError, EmptyDatasetError
from freqstat.descriptive.base import StatisticsEngine, register_engine
from freqstat.descriptive.engines.grouped import calculate_grouped_statistics
from freqstat.descriptive.measures import totals_for
from freqstat.descriptive.model import Analysis, AnalysisContext, FrequencyTotals, GroupedRow, ProcessedData

logger = logging.getLogger(__name__)

ZERO_WIDTH_POLICIES = ("substitute", "raise")


def sturges_class_count(n: int) -> int:
    """k = ceil(1 + 3.322 * log10(n))"""
    if n < 1:
        raise EmptyDatasetError("At least one observation is needed to choose a class count")
    return math.ceil(1 + 3.322 * math.log10(n))


def class_width_for(data_range: float, class_count: int, zero_width_policy: str = "substitute") -> int:
    """
    Class width ceil(range / class_count).

    A width below 1 (all observations identical) is replaced by 1 under the
    'substitute' policy and raises DegenerateClassWidthError under 'raise'.
    """
    if zero_width_policy not in ZERO_WIDTH_POLICIES:
        raise ValueError(f"Unknown zero width policy {zero_width_policy!r}, expected one of {ZERO_WIDTH_POLICIES}")
    class_width = math.ceil(data_range / class_count)
    if class_width < 1:
        if zero_width_policy == "raise":
            raise DegenerateClassWidthError(f"Class width {class_width} from range {data_range} and {class_count} classes")
        logger.warning(f"Class width {class_width} from range {data_range}; using 1")
        class_width = 1
    return class_width


def build_frequency_table(
    sorted_data: Sequence[float],
    minimum: float,
    class_count: int,
    class_width: float,
) -> List[GroupedRow]:
    """
    Count observations into class_count classes of equal width.

    Classes are [lower, upper) except the last, which is [lower, upper] so
    the maximum is always counted. An empty last class is dropped; empty
    interior classes are kept. Cumulative frequency runs over emitted rows.
    """
    rows = []
    cumulative = 0
    last = class_count - 1
    for i in range(class_count):
        lower = minimum + i * class_width
        upper = lower + class_width
        midpoint = (lower + upper) / 2

        if i == last:
            frequency = sum(1 for value in sorted_data if lower <= value <= upper)
        else:
            frequency = sum(1 for value in sorted_data if lower <= value < upper)

        if frequency > 0 or i < last:
            cumulative += frequency
            rows.append(GroupedRow(
                label=f"{lower:.1f} - {upper:.1f}",
                lower_bound=lower,
                upper_bound=upper,
                frequency=frequency,
                cumulative_frequency=cumulative,
                midpoint=midpoint,
                fx=midpoint * frequency,
                x2=midpoint ** 2,
                fx2=midpoint ** 2 * frequency,
            ))
    return rows


def process_data(
    values: Sequence[float],
    variance_method: str = "two_pass",
    zero_width_policy: str = "substitute",
) -> ProcessedData:
    """
    Bin raw observations and compute grouped statistics from the bins.

    Args:
        values: Raw observations, in any order
        variance_method: 'two_pass' or 'shortcut'
        zero_width_policy: 'substitute' or 'raise'

    Returns:
        ProcessedData with the table, its totals and the statistics
    """
    sorted_data = sorted(values)
    class_count = sturges_class_count(len(sorted_data))
    minimum, maximum = sorted_data[0], sorted_data[-1]
    data_range = maximum - minimum
    class_width = class_width_for(data_range, class_count, zero_width_policy)

    table = build_frequency_table(sorted_data, minimum, class_count, class_width)
    totals = totals_for(table)
    statistics = calculate_grouped_statistics(table, totals, variance_method)

    return ProcessedData(
        sorted_data=tuple(sorted_data),
        range=data_range,
        class_count=class_count,
        class_width=class_width,
        frequency_table=tuple(table),
        total_frequency=totals.total_frequency,
        total_fx=totals.total_fx,
        total_fx2=totals.total_fx2,
        statistics=statistics,
    )


@register_engine
@dataclass
class AutoBinningEngine(StatisticsEngine):
    """
    Analyzes raw data as a grouped distribution with automatic classes.

    Attributes:
        zero_width_policy: What to do when all observations are identical
    """
    engine_id: str = "binned"
    zero_width_policy: str = "substitute"

    def __post_init__(self):
        super().__post_init__()
        if self.zero_width_policy not in ZERO_WIDTH_POLICIES:
            raise ValueError(f"Unknown zero width policy {self.zero_width_policy!r}")

    def analyze(self, context: AnalysisContext) -> Analysis:
        """Bin and analyze context.data."""
        self._report_step(info=f"Binning {len(context.data)} values", target=1, reset_counter=True)
        processed = process_data(context.data, self.variance_method, self.zero_width_policy)
        self._report_step(plus_step=1)

        logger.info(
            f"Binned: {len(processed.sorted_data)} values into {len(processed.frequency_table)} of "
            f"{processed.class_count} classes, width {processed.class_width}"
        )

        return Analysis(
            engine_id=self.engine_id,
            statistics=processed.statistics,
            rows=processed.frequency_table,
            totals=FrequencyTotals(processed.total_frequency, processed.total_fx, processed.total_fx2),
            processed=processed,
        )
