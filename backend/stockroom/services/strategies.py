"""Category update strategies for the daily revaluation"""

from ..models import Category, Item

MIN_DESIRABILITY = 0
MAX_DESIRABILITY = 50
LEGENDARY_DESIRABILITY = 80

# Event passes gain faster as the event approaches
EVENT_PASS_FAR_THRESHOLD = 10
EVENT_PASS_NEAR_THRESHOLD = 5


class UpdateStrategy:
    """
    Base class for category update strategies

    Both operations are pure: they read the record as it stands before
    the day's update and return the next value without assigning it.
    Strategies hold no per-item state, so one instance serves every
    item of its category.
    """

    category: Category = None
    freezes_countdown = False

    @property
    def name(self) -> str:
        return type(self).__name__

    def next_countdown(self, item: Item) -> int:
        """Countdown after one day (default: one day closer to expiry)"""
        return item.countdown - 1

    def next_desirability(self, item: Item) -> int:
        """
        Desirability after one day

        Args:
            item: Item record in its pre-update state

        Returns:
            New desirability, clamped to the category's bounds
        """
        raise NotImplementedError

    @staticmethod
    def is_expired(item: Item) -> bool:
        """Expiry is judged on the countdown before the day's decrement"""
        return item.countdown < 0

    @staticmethod
    def clamp(value: int) -> int:
        return max(MIN_DESIRABILITY, min(MAX_DESIRABILITY, value))

    def __repr__(self):
        return f"<{self.name}(category='{self.category}')>"


class NormalStrategy(UpdateStrategy):
    """Loses 1 per day, 2 per day once expired"""

    category = Category.NORMAL
    daily_loss = 1

    def next_desirability(self, item: Item) -> int:
        loss = self.daily_loss * 2 if self.is_expired(item) else self.daily_loss
        return self.clamp(item.desirability - loss)


class AgedCheeseStrategy(UpdateStrategy):
    """Gains 1 per day, 2 per day once expired"""

    category = Category.AGED_CHEESE

    def next_desirability(self, item: Item) -> int:
        gain = 2 if self.is_expired(item) else 1
        return self.clamp(item.desirability + gain)


class LegendaryTokenStrategy(UpdateStrategy):
    """Never expires and never changes value"""

    category = Category.LEGENDARY_TOKEN
    freezes_countdown = True

    def next_countdown(self, item: Item) -> int:
        return item.countdown

    def next_desirability(self, item: Item) -> int:
        return LEGENDARY_DESIRABILITY


class EventPassStrategy(UpdateStrategy):
    """
    Gains value as the event approaches, worthless once it has taken place

    +1 while more than 10 days remain, +2 within 10 days, +3 within 5 days.
    The event happens on day 0: a pass entering the day with a countdown of
    0 or less drops to 0.
    """

    category = Category.EVENT_PASS

    def next_desirability(self, item: Item) -> int:
        if item.countdown <= 0:
            return MIN_DESIRABILITY

        if item.countdown > EVENT_PASS_FAR_THRESHOLD:
            gain = 1
        elif item.countdown > EVENT_PASS_NEAR_THRESHOLD:
            gain = 2
        else:
            gain = 3

        return self.clamp(item.desirability + gain)


class EnchantedGoodStrategy(NormalStrategy):
    """Decays twice as fast as a normal item"""

    category = Category.ENCHANTED_GOOD
    daily_loss = NormalStrategy.daily_loss * 2
