"""freqstat package: Descriptive statistics and frequency distribution tables for raw and grouped data."""

from freqstat.errors import (
    DegenerateClassWidthError,
    DegenerateInputError,
    EmptyDatasetError,
    InvalidIntervalError,
    InvalidTokenError,
    StatisticsError,
)
from freqstat.descriptive import (
    Analysis,
    AnalysisContext,
    GroupedDataItem,
    GroupedRow,
    ProcessedData,
    StatisticalResults,
    Statistics,
    StatisticsConfig,
    StatisticsPipeline,
    UngroupedRow,
)
from freqstat.data_input import add_interval, make_interval, parse_data_points
from freqstat.descriptive.engines.binned import process_data
from freqstat.descriptive.engines.grouped import calculate_grouped_statistics, grouped_frequency_table
from freqstat.descriptive.engines.ungrouped import calculate_ungrouped_statistics, ungrouped_frequency_table

__all__ = [
    "Analysis",
    "AnalysisContext",
    "DegenerateClassWidthError",
    "DegenerateInputError",
    "EmptyDatasetError",
    "GroupedDataItem",
    "GroupedRow",
    "InvalidIntervalError",
    "InvalidTokenError",
    "ProcessedData",
    "StatisticalResults",
    "Statistics",
    "StatisticsConfig",
    "StatisticsError",
    "StatisticsPipeline",
    "UngroupedRow",
    "add_interval",
    "calculate_grouped_statistics",
    "calculate_ungrouped_statistics",
    "grouped_frequency_table",
    "make_interval",
    "parse_data_points",
    "process_data",
    "ungrouped_frequency_table",
]
