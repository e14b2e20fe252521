"""
Pytest fixtures for descriptive statistics tests.
"""
from __future__ import annotations

import pytest
from typing import Any, List, Tuple

from freqstat.descriptive.model import GroupedDataItem


class RecordingHooks:
    """App hooks that remember every call."""

    def __init__(self) -> None:
        self.steps: List[dict] = []
        self.published: List[Tuple[str, Any]] = []

    def report_step(self, info: str = None, target: int = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        self.steps.append({'info': info, 'target': target, 'reset_counter': reset_counter, 'plus_step': plus_step})

    def update_key_value(self, key: str, value: Any) -> None:
        self.published.append((key, value))


@pytest.fixture
def recording_hooks():
    """App hooks recording progress and published results."""
    return RecordingHooks()


@pytest.fixture
def sample_values():
    """Twelve raw observations spread over 12..48."""
    return [12, 15, 18, 22, 25, 30, 32, 35, 38, 42, 45, 48]


@pytest.fixture
def equal_width_intervals():
    """Four classes of width 10, total frequency 30."""
    return [
        GroupedDataItem(0, 10, 5),
        GroupedDataItem(10, 20, 8),
        GroupedDataItem(20, 30, 12),
        GroupedDataItem(30, 40, 5),
    ]


@pytest.fixture
def unequal_width_intervals():
    """Classes of width 10, 20 and 5, total frequency 20."""
    return [
        GroupedDataItem(0, 10, 4),
        GroupedDataItem(10, 30, 10),
        GroupedDataItem(30, 35, 6),
    ]
