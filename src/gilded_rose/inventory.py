"""Inventory container that the engine updates once per day."""

from typing import Iterable, Iterator

import numpy as np

from gilded_rose.engine import UpdateEngine
from gilded_rose.item import Item
from gilded_rose.rules import RuleSet


class Inventory:
    """
    Ordered collection of items updated together once per day.

    The list is shared with the caller, not copied, so items can be
    inspected in place after each update.
    """

    def __init__(self, items: list[Item], rules: RuleSet | None = None):
        self.items = items
        self.engine = UpdateEngine(rules)

    def update_quality(self):
        """Advance every item by one day."""
        self.engine.advance_one_day(self.items)

    def snapshot(self) -> np.ndarray:
        """Current (sell_in, quality) pairs as an (n_items, 2) int array."""
        return snapshot(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]


def snapshot(items: Iterable[Item]) -> np.ndarray:
    """
    Stack (sell_in, quality) for each item into an (n_items, 2) array.

    The array is int64, so values outside the int64 range raise
    OverflowError here even though the engine itself accepts any integer.
    """
    rows = [(item.sell_in, item.quality) for item in items]
    return np.array(rows, dtype=np.int64).reshape(len(rows), 2)
