"""Revaluation services"""

from .strategies import UpdateStrategy
from .factory import StrategyRegistry, get_strategy
from .inventory import Inventory, advance_day

__all__ = [
    "UpdateStrategy",
    "StrategyRegistry",
    "get_strategy",
    "Inventory",
    "advance_day",
]
