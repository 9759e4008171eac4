"""Daily update rules for inventory items."""

from typing import Iterable

from gilded_rose.item import Item
from gilded_rose.rules import DEFAULT_RULES, Category, RuleSet, classify


class UpdateEngine:
    """
    Applies one day of ageing to a sequence of items.

    Each day, for every item independently:
        1. Classify the item by name
        2. Adjust quality using the sell_in from before today
        3. Decrement sell_in (Legendary items are left untouched)

    The pass is total: every name and every integer is accepted, and
    nothing is printed or raised.
    """

    def __init__(self, rules: RuleSet | None = None):
        """
        Args:
            rules: Names and quality bounds to apply (defaults to DEFAULT_RULES)
        """
        self.rules = rules if rules is not None else DEFAULT_RULES
        self._handlers = {
            Category.LEGENDARY: self._update_legendary,
            Category.BACKSTAGE_PASS: self._update_backstage_pass,
            Category.AGED: self._update_aged,
            Category.CONJURED: self._update_conjured,
            Category.REGULAR: self._update_regular,
        }

    def classify(self, item: Item) -> Category:
        return classify(item.name, self.rules)

    def advance_one_day(self, items: Iterable[Item]):
        """Update every item in place by one day."""
        for item in items:
            self.update_item(item)

    def update_item(self, item: Item):
        self._handlers[self.classify(item)](item)

    def _update_legendary(self, item: Item):
        pass

    def _update_backstage_pass(self, item: Item):
        # Tiers are not clamped to max_quality; only the collapse at 0 caps them
        if 6 <= item.sell_in <= 10:
            item.quality += 2
        elif 1 <= item.sell_in <= 5:
            item.quality += 3
        elif item.sell_in == 0:
            item.quality = 0
        else:
            item.quality += 1
        item.sell_in -= 1

    def _update_aged(self, item: Item):
        increase = 2 if item.sell_in == 0 else 1
        item.quality = self.rules.clamp_up(item.quality + increase)
        item.sell_in -= 1

    def _update_conjured(self, item: Item):
        # Conjured items degrade twice as fast as regular ones
        self._degrade(item, 2 * self._regular_decrease(item))

    def _update_regular(self, item: Item):
        self._degrade(item, self._regular_decrease(item))

    def _degrade(self, item: Item, decrease: int):
        item.quality = self.rules.clamp_down(item.quality - decrease)
        item.sell_in -= 1

    @staticmethod
    def _regular_decrease(item: Item) -> int:
        return 2 if item.sell_in == 0 else 1


def advance_one_day(items: Iterable[Item], rules: RuleSet | None = None):
    """Advance every item by one day using the given (or default) rules."""
    UpdateEngine(rules).advance_one_day(items)
