from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import logging

from freqstat.app_hooks import AppHooks
from freqstat.data_input import parse_data_points
from .model import Analysis, AnalysisContext, DataType, GroupedDataItem, StatisticalResults
from .pipeline import StatisticsConfig, StatisticsPipeline

logger = logging.getLogger(__name__)


class Statistics:
    """
    High-level interface for computing descriptive statistics.

    This is a convenience wrapper around StatisticsPipeline that builds the
    AnalysisContext for the caller.

    Example:
        # Raw observations
        stats = Statistics(data=[1, 2, 3, 4])
        stats.results.median  # 2.5

        # Raw text, binned automatically
        stats = Statistics(text="12, 15, 18, 22", data_type="grouped")

        # Class intervals
        stats = Statistics(grouped_data=[GroupedDataItem(0, 10, 4), GroupedDataItem(10, 20, 6)])
    """

    def __init__(
        self,
        data: Optional[Iterable[float]] = None,
        grouped_data: Optional[Iterable[GroupedDataItem]] = None,
        text: Optional[str] = None,
        data_type: Optional[DataType] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize statistics computation.

        Args:
            data: Optional raw observations
            grouped_data: Optional class intervals
            text: Optional raw text, parsed into observations
            data_type: 'ungrouped' or 'grouped'; inferred when omitted
            config_dict: Dictionary of options (e.g., {'variance_method': 'shortcut'})
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting
        """
        self.app_hooks = app_hooks

        if text is not None:
            data = parse_data_points(text)

        grouped_data = list(grouped_data or [])
        if data_type is None:
            data_type = "grouped" if grouped_data else "ungrouped"
        self.context = AnalysisContext(data_type=data_type, data=list(data or []), grouped_data=grouped_data)

        # Create configuration
        if config_dict:
            self.config = StatisticsConfig.from_dict(config_dict)
        elif config_file:
            self.config = StatisticsConfig(config_file=config_file)
        else:
            self.config = StatisticsConfig()

        self.pipeline = StatisticsPipeline(config=self.config, app_hooks=app_hooks)

        # Run analysis automatically
        self._analysis = None
        if self.context.data or self.context.grouped_data:
            self._analysis = self._analyze()

    def _analyze(self) -> Analysis:
        logger.info(f"Computing {self.context.engine_id()} statistics")
        return self.pipeline.run(self.context)

    @property
    def analysis(self) -> Optional[Analysis]:
        """Get the full analysis (results and frequency table)."""
        return self._analysis

    @property
    def results(self) -> Optional[StatisticalResults]:
        """Get the full-precision statistical results."""
        return self._analysis.statistics if self._analysis else None

    def analyze(
        self,
        data: Optional[Iterable[float]] = None,
        grouped_data: Optional[Iterable[GroupedDataItem]] = None,
        data_type: Optional[DataType] = None,
    ) -> Analysis:
        """
        Analyze new data, replacing the previous inputs.

        Args:
            data: Optional raw observations
            grouped_data: Optional class intervals
            data_type: Optional new entry mode

        Returns:
            Analysis for the new data
        """
        if data is not None or grouped_data is not None:
            self.context.reset()
            self.context.data = list(data or [])
            self.context.grouped_data = list(grouped_data or [])
        if data_type is not None:
            self.context.data_type = data_type

        self._analysis = self._analyze()
        return self._analysis

    def reset(self) -> None:
        """Discard inputs and results."""
        self.context.reset()
        self._analysis = None

    def get_value(self, name: str, default=None):
        """
        Convenience method to get one rounded statistic.

        Args:
            name: Statistic name (e.g., 'mean', 'standard_deviation')
            default: Default value if not available

        Returns:
            The statistic rounded to the configured decimals, or default
        """
        if self._analysis:
            return self._analysis.statistics.rounded(self.config.decimals).to_dict().get(name, default)
        return default

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the analysis as a dictionary rounded for display.

        Returns:
            Dictionary with statistics, rows and totals
        """
        if self._analysis:
            return self._analysis.to_dict(self.config.decimals)
        return {}
