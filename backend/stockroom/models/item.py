"""Item model"""

from typing import Optional, Union

from .category import Category, category_for_name


class Item:
    """
    Inventory item record

    Holds no behaviour and enforces nothing: update strategies compute
    the next countdown and desirability, the caller assigns them.
    """

    def __init__(
        self,
        name: str,
        countdown: int,
        desirability: int,
        category: Optional[Union[Category, str]] = None
    ):
        self.name = name
        self.countdown = countdown  # Days left before expiry, negative once expired
        self.desirability = desirability
        self.category = category if category is not None else category_for_name(name)

    def __str__(self):
        return f"{self.name}, {self.countdown}, {self.desirability}"

    def __repr__(self):
        return (
            f"<Item(name='{self.name}', category='{self.category}', "
            f"countdown={self.countdown}, desirability={self.desirability})>"
        )
