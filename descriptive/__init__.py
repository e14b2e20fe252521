"""
Descriptive statistics for ungrouped and grouped data.

Main components:
    - StatisticsEngine: Base class for engines, one per data shape
    - StatisticsPipeline: Selects and runs the engine for an AnalysisContext
    - Statistics: Convenience wrapper
    - Built-in engines: ungrouped data, class intervals, automatic binning
"""

from freqstat.descriptive.base import StatisticsEngine, register_engine, get_engine_registry
from freqstat.descriptive.pipeline import StatisticsPipeline, StatisticsConfig
from freqstat.descriptive.model import (
    Analysis,
    AnalysisContext,
    FrequencyTableRow,
    FrequencyTotals,
    GroupedDataItem,
    GroupedRow,
    ProcessedData,
    StatisticalResults,
    UngroupedRow,
)
from freqstat.descriptive.statistics import Statistics

# Import engines to ensure they're registered
from freqstat.descriptive import engines

__all__ = [
    'StatisticsEngine',
    'register_engine',
    'get_engine_registry',
    'StatisticsPipeline',
    'StatisticsConfig',
    'Statistics',
    'Analysis',
    'AnalysisContext',
    'FrequencyTableRow',
    'FrequencyTotals',
    'GroupedDataItem',
    'GroupedRow',
    'ProcessedData',
    'StatisticalResults',
    'UngroupedRow',
    'engines',
]
