"""Category to strategy lookup"""

from functools import lru_cache
from typing import Any, Dict, List, Union

from ..exceptions import ConfigurationError
from ..models import Category
from ..utils.logging import get_logger
from .strategies import (
    UpdateStrategy,
    NormalStrategy,
    AgedCheeseStrategy,
    LegendaryTokenStrategy,
    EventPassStrategy,
    EnchantedGoodStrategy,
)

logger = get_logger(__name__)


class StrategyRegistry:
    """
    Maps each category to its shared strategy instance
    """

    def __init__(self):
        self.strategies: Dict[Category, UpdateStrategy] = {}
        self._load_default_strategies()

    def _load_default_strategies(self):
        """Register one strategy per category"""

        self.register(NormalStrategy())
        self.register(AgedCheeseStrategy())
        self.register(LegendaryTokenStrategy())
        self.register(EventPassStrategy())
        self.register(EnchantedGoodStrategy())

    def register(self, strategy: UpdateStrategy):
        """Register a strategy under its category, replacing any previous one"""
        self.strategies[Category(strategy.category)] = strategy
        logger.debug("Registered update strategy", category=str(strategy.category), strategy=strategy.name)

    def get(self, category: Union[Category, str]) -> UpdateStrategy:
        """
        Look up the strategy for a category

        Args:
            category: Category member or its tag value

        Returns:
            The shared strategy instance

        Raises:
            ConfigurationError: if the tag is not a known category
        """
        try:
            return self.strategies[Category(category)]
        except (ValueError, KeyError):
            raise ConfigurationError(category, known=[c.value for c in self.strategies]) from None

    def summary(self) -> List[Dict[str, Any]]:
        """Get summary of all registered strategies"""
        return [
            {
                "category": category.value,
                "strategy": strategy.name,
                "freezes_countdown": strategy.freezes_countdown
            }
            for category, strategy in self.strategies.items()
        ]


@lru_cache(maxsize=None)
def get_registry() -> StrategyRegistry:
    """Process-wide registry, built on first use"""
    return StrategyRegistry()


def get_strategy(category: Union[Category, str]) -> UpdateStrategy:
    """Look up the strategy for a category in the process-wide registry"""
    return get_registry().get(category)
