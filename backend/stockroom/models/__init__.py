"""Inventory models"""

from .category import Category, category_for_name
from .item import Item

__all__ = [
    "Category",
    "category_for_name",
    "Item",
]
