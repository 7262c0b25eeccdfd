"""Item categories"""

from enum import Enum


class Category(str, Enum):
    """Closed set of item categories, each revalued by its own rule"""
    NORMAL = "Normal"
    AGED_CHEESE = "AgedCheese"
    LEGENDARY_TOKEN = "LegendaryToken"
    EVENT_PASS = "EventPass"
    ENCHANTED_GOOD = "EnchantedGood"

    def __str__(self) -> str:
        return self.value


def category_for_name(name: str) -> Category:
    """Map a business item name to its category"""

    if name == "Aged Brie":
        return Category.AGED_CHEESE
    if "Sulfuras" in name:
        return Category.LEGENDARY_TOKEN
    if "Backstage passes" in name:
        return Category.EVENT_PASS
    if name.startswith("Conjured"):
        return Category.ENCHANTED_GOOD
    return Category.NORMAL
