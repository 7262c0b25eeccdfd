"""Item schemas"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from ..models import Category, Item


class ItemBase(BaseModel):
    """Base item schema"""

    name: str = Field(..., min_length=1, max_length=500)
    countdown: int
    desirability: int


class ItemCreate(ItemBase):
    """Schema for an item read from an inventory file"""

    category: Optional[Category] = None  # Derived from the name when omitted

    def to_item(self) -> Item:
        return Item(self.name, self.countdown, self.desirability, category=self.category)


class ItemResponse(ItemBase):
    """Schema for a reported item"""

    category: Category

    class Config:
        from_attributes = True


class InventorySnapshot(BaseModel):
    """State of the whole inventory at the end of a day"""

    day: int = Field(..., ge=0)
    items: List[ItemResponse] = []


def load_inventory(path: Union[str, Path]) -> List[Item]:
    """
    Read an inventory file

    The file holds a JSON array of objects with name, countdown,
    desirability and an optional category.

    Raises:
        pydantic.ValidationError: if the file is not JSON of that shape
    """
    records = TypeAdapter(List[ItemCreate]).validate_json(Path(path).read_bytes())
    return [record.to_item() for record in records]
