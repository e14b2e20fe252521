"""
Pipeline for running statistics engines.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from freqstat.errors import StatisticsError
from freqstat.descriptive.base import StatisticsEngine, get_engine_registry
from freqstat.descriptive.engines.binned import ZERO_WIDTH_POLICIES
from freqstat.descriptive.measures import DEFAULT_DECIMALS, check_variance_method
from freqstat.descriptive.model import Analysis, AnalysisContext

logger = logging.getLogger(__name__)


@dataclass
class StatisticsConfig:
    """
    Configuration for statistics computation.

    Attributes:
        engines: Dict of engine_id -> enabled status
        variance_method: 'two_pass' (default) or 'shortcut'
        decimals: Decimal places used when results are rounded for display
        zero_width_policy: 'substitute' (default) or 'raise' when automatic
            binning yields a class width below 1
        config_file: Path to YAML config file (optional)
    """
    engines: Dict[str, bool] = field(default_factory=dict)
    variance_method: str = "two_pass"
    decimals: int = DEFAULT_DECIMALS
    zero_width_policy: str = "substitute"
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists, then validate."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()
        elif self.config_file:
            logger.warning(f"Statistics config file {self.config_file} not found, using defaults")
        self._validate()

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section from the YAML file. An unreadable file
        is logged and the defaults are kept.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")
            return

        statistics_config = data.get('statistics', {}) if isinstance(data, dict) else {}
        if not isinstance(statistics_config, dict):
            logger.warning(f"Ignoring malformed 'statistics' section in {self.config_file}")
            return
        self._apply(statistics_config)
        logger.info(f"Loaded statistics config from {self.config_file}")

    def _apply(self, options: Dict[str, Any]) -> None:
        # engine enabled/disabled settings
        for engine_id, settings in (options.get('engines') or {}).items():
            if isinstance(settings, dict):
                self.engines[engine_id] = settings.get('enabled', True)
            elif isinstance(settings, bool):
                self.engines[engine_id] = settings

        for key in ('variance_method', 'decimals', 'zero_width_policy'):
            if key in options:
                setattr(self, key, options[key])

    def _validate(self) -> None:
        check_variance_method(self.variance_method)
        if self.zero_width_policy not in ZERO_WIDTH_POLICIES:
            raise ValueError(f"Unknown zero width policy {self.zero_width_policy!r}, expected one of {ZERO_WIDTH_POLICIES}")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError(f"decimals must be a non-negative integer, got {self.decimals!r}")

    def is_enabled(self, engine_id: str) -> bool:
        """
        Check if an engine is enabled.

        Args:
            engine_id: Identifier of the engine to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.engines.get(engine_id, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatisticsConfig:
        """
        Create configuration from dictionary.

        Accepts the same keys as the 'statistics' section of a YAML file.

        Args:
            data: Dictionary with optional 'engines', 'variance_method',
                'decimals' and 'zero_width_policy' keys

        Returns:
            StatisticsConfig instance
        """
        config = cls()
        config._apply(data)
        config._validate()
        return config

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> StatisticsConfig:
        """
        Load configuration from a specific YAML file.

        Unlike config_file, a missing or invalid file is an error here.
        """
        if not yaml_path or not Path(yaml_path).exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get('statistics', {}), dict):
            raise ValueError(f"Expected a 'statistics' mapping in {yaml_path}")
        config = cls.from_dict(data.get('statistics', {}))
        config.config_file = Path(yaml_path)
        return config


@dataclass
class StatisticsPipeline:
    """
    Pipeline selecting and running the statistics engine for a context.

    Attributes:
        engines: List of engine instances to choose from
        config: Configuration for the pipeline
        app_hooks: Optional application hooks for progress reporting
    """
    engines: List[StatisticsEngine] = field(default_factory=list)
    config: StatisticsConfig = field(default_factory=StatisticsConfig)
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """
        Initialize engines from registry if none provided.
        """
        if not self.engines:
            self._load_engines_from_registry()

    def _load_engines_from_registry(self) -> None:
        """
        Instantiate every registered engine with configuration applied.

        Options are passed only to engines that declare them as fields.
        """
        registry = get_engine_registry()
        for engine_id, engine_cls in registry.items():
            accepted = {f.name for f in fields(engine_cls)}
            kwargs = {
                'enabled': self.config.is_enabled(engine_id),
                'variance_method': self.config.variance_method,
                'app_hooks': self.app_hooks,
            }
            if 'zero_width_policy' in accepted:
                kwargs['zero_width_policy'] = self.config.zero_width_policy
            self.engines.append(engine_cls(**kwargs))
            logger.debug(f"Loaded engine: {engine_id} (enabled={kwargs['enabled']})")

    def get_engine(self, engine_id: str) -> Optional[StatisticsEngine]:
        """Return the engine with the given id, or None."""
        for engine in self.engines:
            if engine.engine_id == engine_id:
                return engine
        return None

    def run(self, context: AnalysisContext) -> Analysis:
        """
        Run the engine matching the context's data shape.

        Args:
            context: Caller-owned context with the data to analyze

        Returns:
            Analysis with full-precision results

        Raises:
            ValueError: No enabled engine handles the data shape
            StatisticsError: The data cannot be analyzed
        """
        engine_id = context.engine_id()
        engine = self.get_engine(engine_id)
        if engine is None:
            raise ValueError(f"No statistics engine registered for {engine_id!r}")
        if not engine.enabled:
            raise ValueError(f"Statistics engine {engine_id!r} is disabled")

        logger.debug(f"Running engine: {engine_id}")
        try:
            analysis = engine.analyze(context)
        except StatisticsError as e:
            logger.error(f"Error in engine {engine_id}: {e}")
            raise

        if self.app_hooks and callable(getattr(self.app_hooks, "update_key_value", None)):
            self.app_hooks.update_key_value("analysis", analysis)
        return analysis
