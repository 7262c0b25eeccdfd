"""Pydantic schemas for inventory files and reports"""

from .item import ItemCreate, ItemResponse, InventorySnapshot, load_inventory

__all__ = [
    "ItemCreate",
    "ItemResponse",
    "InventorySnapshot",
    "load_inventory",
]
