"""Day-advance orchestration over an inventory"""

from typing import Iterable, List

from ..models import Item
from ..schemas import InventorySnapshot, ItemResponse
from ..utils.logging import get_logger
from .factory import get_strategy

logger = get_logger(__name__)


def advance_day(records: Iterable[Item]) -> None:
    """
    Revalue every record for one elapsed day, in place

    Strategies for all records are resolved before any record is touched,
    so an unknown category leaves the whole collection unchanged.

    Args:
        records: Item records, processed in their given order

    Raises:
        ConfigurationError: if a record carries an unknown category
    """
    records = list(records)
    strategies = [get_strategy(record.category) for record in records]

    for record, strategy in zip(records, strategies):
        countdown = strategy.next_countdown(record)
        desirability = strategy.next_desirability(record)

        logger.debug(
            "Revalued item",
            item=record.name,
            category=str(record.category),
            countdown=(record.countdown, countdown),
            desirability=(record.desirability, desirability)
        )

        record.countdown = countdown
        record.desirability = desirability

    logger.info("Advanced inventory by one day", items=len(records))


class Inventory:
    """
    The shop's stock, aged one day at a time
    """

    def __init__(self, items: List[Item]):
        self.items = items
        self.day = 0

    def advance_day(self) -> None:
        """Age every item by one day"""
        advance_day(self.items)
        self.day += 1

    def advance(self, days: int = 1) -> None:
        """Age every item by several days"""

        if days < 0:
            raise ValueError(f"Cannot advance by a negative number of days: {days}")

        for _ in range(days):
            self.advance_day()

    def snapshot(self) -> InventorySnapshot:
        """Current state of every item"""
        return InventorySnapshot(
            day=self.day,
            items=[ItemResponse.model_validate(item) for item in self.items]
        )

    def __len__(self):
        return len(self.items)
