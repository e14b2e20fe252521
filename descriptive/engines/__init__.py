"""
Built-in statistics engines.

Import engines here to automatically register them.
"""

from freqstat.descriptive.engines.ungrouped import UngroupedEngine
from freqstat.descriptive.engines.grouped import GroupedEngine
from freqstat.descriptive.engines.binned import AutoBinningEngine

__all__ = [
    'UngroupedEngine',
    'GroupedEngine',
    'AutoBinningEngine',
]
