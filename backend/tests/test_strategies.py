"""Tests for category update strategies"""

import pytest

from stockroom.models import Category, Item
from stockroom.services.strategies import (
    UpdateStrategy,
    NormalStrategy,
    AgedCheeseStrategy,
    LegendaryTokenStrategy,
    EventPassStrategy,
    EnchantedGoodStrategy,
    MAX_DESIRABILITY,
)


def item(category, countdown, desirability):
    return Item("Test Item", countdown, desirability, category=category)


def test_default_countdown_decrements():
    """Test every strategy except the legendary one counts down"""

    for strategy in [NormalStrategy(), AgedCheeseStrategy(), EventPassStrategy(), EnchantedGoodStrategy()]:
        assert strategy.next_countdown(item(strategy.category, 3, 10)) == 2
        assert strategy.next_countdown(item(strategy.category, -4, 10)) == -5


def test_strategies_do_not_mutate():
    """Test strategies only compute next values"""

    record = item(Category.NORMAL, 5, 10)
    strategy = NormalStrategy()

    strategy.next_countdown(record)
    strategy.next_desirability(record)

    assert record.countdown == 5
    assert record.desirability == 10


def test_base_strategy_has_no_desirability_rule():
    """Test the base class leaves desirability to subclasses"""

    with pytest.raises(NotImplementedError):
        UpdateStrategy().next_desirability(item(Category.NORMAL, 1, 1))


@pytest.mark.parametrize("countdown,desirability,expected", [
    (10, 20, 19),
    (0, 20, 19),  # Last day before expiry
    (-1, 20, 18),
    (5, 0, 0),
    (-1, 1, 0),  # Floor beats the double decay
    (3, 80, 50),  # Out of range start is clamped
])
def test_normal(countdown, desirability, expected):
    """Test normal items decay, twice as fast once expired"""

    assert NormalStrategy().next_desirability(item(Category.NORMAL, countdown, desirability)) == expected


@pytest.mark.parametrize("countdown,desirability,expected", [
    (2, 0, 1),
    (0, 10, 11),
    (-1, 10, 12),
    (5, 49, 50),
    (-3, 49, 50),
    (1, 50, 50),
])
def test_aged_cheese(countdown, desirability, expected):
    """Test aged cheese improves, twice as fast once expired"""

    assert AgedCheeseStrategy().next_desirability(item(Category.AGED_CHEESE, countdown, desirability)) == expected


def test_legendary_token():
    """Test legendary tokens never change"""

    strategy = LegendaryTokenStrategy()

    for countdown in [10, 0, -1]:
        record = item(Category.LEGENDARY_TOKEN, countdown, 80)
        assert strategy.next_countdown(record) == countdown
        assert strategy.next_desirability(record) == 80

    assert strategy.freezes_countdown


@pytest.mark.parametrize("countdown,desirability,expected", [
    (15, 20, 21),
    (11, 20, 21),
    (10, 20, 22),
    (6, 20, 22),
    (5, 20, 23),
    (1, 20, 23),
    (0, 40, 0),  # Event day
    (-1, 40, 0),
    (5, 49, 50),  # Clamped, not skipped
    (10, 49, 50),
    (5, 48, 50),
])
def test_event_pass(countdown, desirability, expected):
    """Test event passes gain value until the event, then drop to zero"""

    assert EventPassStrategy().next_desirability(item(Category.EVENT_PASS, countdown, desirability)) == expected


@pytest.mark.parametrize("countdown,desirability,expected", [
    (3, 6, 4),
    (2, 4, 2),
    (0, 10, 8),
    (-1, 10, 6),
    (-1, 3, 0),
    (4, 1, 0),
])
def test_enchanted_good(countdown, desirability, expected):
    """Test enchanted goods decay twice as fast as normal items"""

    assert EnchantedGoodStrategy().next_desirability(item(Category.ENCHANTED_GOOD, countdown, desirability)) == expected


def test_clamp():
    """Test the shared clamp keeps values within bounds"""

    assert UpdateStrategy.clamp(-7) == 0
    assert UpdateStrategy.clamp(25) == 25
    assert UpdateStrategy.clamp(MAX_DESIRABILITY + 3) == MAX_DESIRABILITY
