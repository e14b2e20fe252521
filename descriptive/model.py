"""
Data models for the descriptive statistics core.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

DataType = Literal["ungrouped", "grouped"]


def format_bound(value: float) -> str:
    """Render a bound the way the data-entry forms display it ('10', '10.5')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _round(value: float, decimals: Optional[int]) -> float:
    return value if decimals is None else round(value, decimals)


@dataclass(frozen=True)
class GroupedDataItem:
    """
    A class interval with its observation count.

    Attributes:
        lower_bound: Inclusive lower bound.
        upper_bound: Upper bound, strictly greater than lower_bound.
        frequency: Number of observations in the class.
    """
    lower_bound: float
    upper_bound: float
    frequency: int

    @property
    def midpoint(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    @property
    def label(self) -> str:
        return f"{format_bound(self.lower_bound)} - {format_bound(self.upper_bound)}"


@dataclass(frozen=True)
class UngroupedRow:
    """One table row per sorted observation."""
    value: float
    x2: float
    kind: Literal["ungrouped"] = field(default="ungrouped", init=False)

    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, Any]:
        return {'kind': self.kind, 'value': self.value, 'x2': _round(self.x2, decimals)}


@dataclass(frozen=True)
class GroupedRow:
    """
    One table row per class interval.

    Attributes:
        label: Display label of the class ("12.0 - 21.0").
        lower_bound, upper_bound: Class limits.
        frequency: Observations in the class.
        cumulative_frequency: Running total up to and including this class.
        midpoint: Class mark.
        fx: midpoint * frequency.
        x2: midpoint squared.
        fx2: x2 * frequency.
    """
    label: str
    lower_bound: float
    upper_bound: float
    frequency: int
    cumulative_frequency: int
    midpoint: float
    fx: float
    x2: float
    fx2: float
    kind: Literal["grouped"] = field(default="grouped", init=False)

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'label': self.label,
            'lower_bound': self.lower_bound,
            'upper_bound': self.upper_bound,
            'frequency': self.frequency,
            'cumulative_frequency': self.cumulative_frequency,
            'midpoint': _round(self.midpoint, decimals),
            'fx': _round(self.fx, decimals),
            'x2': _round(self.x2, decimals),
            'fx2': _round(self.fx2, decimals),
        }


FrequencyTableRow = Union[UngroupedRow, GroupedRow]


@dataclass(frozen=True)
class FrequencyTotals:
    """Column totals of a grouped frequency table."""
    total_frequency: int
    total_fx: float
    total_fx2: float


@dataclass(frozen=True)
class StatisticalResults:
    """
    Measures of central tendency and dispersion, at full precision.

    ``mode`` is None when the data has no mode.
    """
    mean: float
    median: float
    mode: Optional[Tuple[float, ...]]
    variance: float
    standard_deviation: float

    def rounded(self, decimals: int = 4) -> StatisticalResults:
        """Return a copy rounded for display."""
        return StatisticalResults(
            mean=round(self.mean, decimals),
            median=round(self.median, decimals),
            mode=None if self.mode is None else tuple(round(m, decimals) for m in self.mode),
            variance=round(self.variance, decimals),
            standard_deviation=round(self.standard_deviation, decimals),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mean': self.mean,
            'median': self.median,
            'mode': None if self.mode is None else list(self.mode),
            'variance': self.variance,
            'standard_deviation': self.standard_deviation,
        }


@dataclass(frozen=True)
class ProcessedData:
    """
    Everything the automatic-binning flow hands to the presentation layer.
    """
    sorted_data: Tuple[float, ...]
    range: float
    class_count: int
    class_width: float
    frequency_table: Tuple[GroupedRow, ...]
    total_frequency: int
    total_fx: float
    total_fx2: float
    statistics: StatisticalResults

    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, Any]:
        stats = self.statistics if decimals is None else self.statistics.rounded(decimals)
        return {
            'sorted_data': list(self.sorted_data),
            'range': self.range,
            'class_count': self.class_count,
            'class_width': self.class_width,
            'frequency_table': [row.to_dict(decimals) for row in self.frequency_table],
            'total_frequency': self.total_frequency,
            'total_fx': _round(self.total_fx, decimals),
            'total_fx2': _round(self.total_fx2, decimals),
            'statistics': stats.to_dict(),
        }


@dataclass
class AnalysisContext:
    """
    Caller-owned state of a data-entry session.

    Attributes:
        data_type: Selected entry mode, 'ungrouped' or 'grouped'.
        data: Raw observations entered so far.
        grouped_data: Class intervals entered so far.
    """
    data_type: DataType = "ungrouped"
    data: List[float] = field(default_factory=list)
    grouped_data: List[GroupedDataItem] = field(default_factory=list)

    def engine_id(self) -> str:
        """
        Select the engine for the current data shape.

        Raw data in grouped mode is binned automatically.
        """
        if self.data_type == "ungrouped":
            return "ungrouped"
        if self.data_type == "grouped":
            return "grouped" if self.grouped_data else "binned"
        raise ValueError(f"Unknown data type: {self.data_type!r}")

    def reset(self) -> None:
        """Discard accumulated inputs, keeping the selected mode."""
        self.data = []
        self.grouped_data = []


@dataclass(frozen=True)
class Analysis:
    """
    Output of a statistics engine.

    Attributes:
        engine_id: Engine that produced the analysis.
        statistics: Full-precision results.
        rows: Ordered frequency table rows.
        totals: Column totals (grouped flows only).
        processed: Full binning output (automatic binning only).
    """
    engine_id: str
    statistics: StatisticalResults
    rows: Tuple[FrequencyTableRow, ...]
    totals: Optional[FrequencyTotals] = None
    processed: Optional[ProcessedData] = None

    def to_dict(self, decimals: Optional[int] = 4) -> Dict[str, Any]:
        """Convert to plain data, rounded for display unless decimals is None."""
        stats = self.statistics if decimals is None else self.statistics.rounded(decimals)
        result: Dict[str, Any] = {
            'engine_id': self.engine_id,
            'statistics': stats.to_dict(),
            'rows': [row.to_dict(decimals) for row in self.rows],
        }
        if self.totals is not None:
            result['totals'] = {
                'total_frequency': self.totals.total_frequency,
                'total_fx': _round(self.totals.total_fx, decimals),
                'total_fx2': _round(self.totals.total_fx2, decimals),
            }
        if self.processed is not None:
            result['processed'] = self.processed.to_dict(decimals)
        return result
