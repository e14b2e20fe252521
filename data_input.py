"""
Input boundary: turns what the data-entry forms collect into validated
values for the statistics core.
"""
import logging
import math
import re
from typing import Any, Iterable, List

from .descriptive.model import GroupedDataItem
from .errors import EmptyDatasetError, InvalidIntervalError, InvalidTokenError

# Re-use higher-level logger (inherits configuration from main script)
logger = logging.getLogger(__name__)

SEPARATOR_RE = re.compile(r"[\s,;]+")


def tokenize(text: str) -> List[str]:
    """Split text on whitespace, commas and semicolons, dropping empty tokens."""
    if not text:
        return []
    return [token for token in SEPARATOR_RE.split(text.strip()) if token]


def parse_number(token: Any) -> float:
    """
    Parse a single token as a finite number.

    Raises:
        InvalidTokenError: The token is not a finite number.
    """
    try:
        value = float(token)
    except (TypeError, ValueError):
        raise InvalidTokenError(token) from None
    if not math.isfinite(value):
        raise InvalidTokenError(token)
    return value


def parse_data_points(text: str) -> List[float]:
    """
    Parse raw text such as "12, 15; 18 22" into observations.

    Raises:
        EmptyDatasetError: The text holds no tokens.
        InvalidTokenError: A token is not a finite number; nothing is returned.
    """
    tokens = tokenize(text)
    if not tokens:
        raise EmptyDatasetError("Please enter data values")
    values = [parse_number(token) for token in tokens]
    logger.debug(f"Parsed {len(values)} data points")
    return values


def make_interval(lower_bound: Any, upper_bound: Any, frequency: Any) -> GroupedDataItem:
    """
    Build a class interval from form values.

    Raises:
        InvalidIntervalError: Non-numeric values, upper bound not above the
            lower bound, or a frequency that is not a positive integer.
    """
    try:
        lower = parse_number(lower_bound)
        upper = parse_number(upper_bound)
        freq = parse_number(frequency)
    except InvalidTokenError:
        raise InvalidIntervalError("Please enter valid numbers") from None

    if upper <= lower:
        raise InvalidIntervalError("Upper bound must be greater than lower bound")
    if freq <= 0 or not freq.is_integer():
        raise InvalidIntervalError("Frequency must be a positive integer")
    return GroupedDataItem(lower_bound=lower, upper_bound=upper, frequency=int(freq))


def overlaps(first: GroupedDataItem, second: GroupedDataItem) -> bool:
    """True when two intervals share more than a boundary point."""
    return first.lower_bound < second.upper_bound and second.lower_bound < first.upper_bound


def add_interval(items: Iterable[GroupedDataItem], item: GroupedDataItem) -> List[GroupedDataItem]:
    """
    Return a new list with item appended.

    Raises:
        InvalidIntervalError: item overlaps an existing interval.
    """
    existing = list(items)
    for other in existing:
        if overlaps(item, other):
            raise InvalidIntervalError(f"New interval {item.label} overlaps with existing interval {other.label}")
    return existing + [item]
