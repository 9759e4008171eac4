"""Daily quality and sell-in updates for Gilded Rose inventory."""

from gilded_rose.engine import UpdateEngine, advance_one_day
from gilded_rose.inventory import Inventory
from gilded_rose.item import Item
from gilded_rose.rules import (
    DEFAULT_RULES,
    MAX_ITEM_QUALITY,
    MIN_ITEM_QUALITY,
    Category,
    RuleSet,
    classify,
)
from gilded_rose.simulation import SimulationHistory, simulate

__all__ = [
    "Item",
    "Inventory",
    "UpdateEngine",
    "advance_one_day",
    "Category",
    "RuleSet",
    "DEFAULT_RULES",
    "MIN_ITEM_QUALITY",
    "MAX_ITEM_QUALITY",
    "classify",
    "SimulationHistory",
    "simulate",
]
