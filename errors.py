"""
Exceptions raised by freqstat computations.

Every error is local to a single call: either a complete result is produced
or one of these is raised to the caller.
"""
from __future__ import annotations

from typing import Any


class StatisticsError(Exception):
    """Base class for all freqstat errors."""


class DegenerateInputError(StatisticsError):
    """The input cannot produce meaningful statistics."""


class EmptyDatasetError(DegenerateInputError, ValueError):
    """Zero observations, or a frequency distribution with zero total frequency."""


class DegenerateClassWidthError(DegenerateInputError):
    """Automatic binning produced a class width below 1."""


class InvalidIntervalError(StatisticsError, ValueError):
    """A class interval is malformed or overlaps another interval."""


class InvalidTokenError(StatisticsError, ValueError):
    """A token in raw text input is not a finite number."""

    def __init__(self, token: Any, message: str = None) -> None:
        self.token = token
        super().__init__(message or f"Invalid number: {token}")
