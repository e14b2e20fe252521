"""
Base classes for statistics engines.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Type

from freqstat.descriptive.measures import check_variance_method
from freqstat.descriptive.model import Analysis, AnalysisContext

logger = logging.getLogger(__name__)

# Engine Registry
_ENGINE_REGISTRY: Dict[str, Type['StatisticsEngine']] = {}


def register_engine(cls: Type['StatisticsEngine']) -> Type['StatisticsEngine']:
    """
    Decorator to register an engine class in the global registry.

    Usage:
        @register_engine
        @dataclass
        class MyEngine(StatisticsEngine):
            engine_id: str = "my_engine"
            ...
    """
    if hasattr(cls, 'engine_id'):
        _ENGINE_REGISTRY[cls.engine_id] = cls
        logger.debug(f"Registered statistics engine: {cls.engine_id}")
    else:
        logger.warning(f"Engine {cls.__name__} missing 'engine_id' attribute, not registered")
    return cls


def get_engine_registry() -> Dict[str, Type['StatisticsEngine']]:
    """Get the global engine registry."""
    return _ENGINE_REGISTRY.copy()


@dataclass
class StatisticsEngine(ABC):
    """
    Base class for statistics engines.

    An engine turns one data shape (raw observations, class intervals, or raw
    observations to be binned) into an Analysis. Engines hold configuration
    only; every call to analyze() is independent.

    Attributes:
        engine_id: Unique identifier for this engine
        enabled: Whether this engine is enabled (can be set via config)
        variance_method: 'two_pass' or 'shortcut'
        app_hooks: Optional application hooks for progress reporting
    """
    engine_id: str = ""
    enabled: bool = True
    variance_method: str = "two_pass"
    app_hooks: Any = None

    @abstractmethod
    def analyze(self, context: AnalysisContext) -> Analysis:
        """
        Compute statistics and the frequency table for the context's data.

        Args:
            context: Caller-owned context holding the input data

        Returns:
            Analysis with full-precision results
        """
        pass

    def __post_init__(self):
        """Validate engine configuration."""
        if not self.engine_id:
            raise ValueError(f"{self.__class__.__name__} must define engine_id")
        check_variance_method(self.variance_method)

    def _report_step(self, info: str = "", target: int = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """Report a step via app hooks if available.

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)
