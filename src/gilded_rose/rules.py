"""Item categories and the rule set used to classify items by name."""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

MIN_ITEM_QUALITY = 0
MAX_ITEM_QUALITY = 50

LEGENDARY_NAME = "Sulfuras, Hand of Ragnaros"
AGED_NAME = "Aged Brie"
BACKSTAGE_PREFIX = "Backstage passes to"
CONJURED_PREFIX = "Conjured"


class Category(str, Enum):
    """Rule categories, listed in classification order."""

    LEGENDARY = "legendary"
    BACKSTAGE_PASS = "backstage_pass"
    AGED = "aged"
    CONJURED = "conjured"
    REGULAR = "regular"


@dataclass(frozen=True)
class RuleSet:
    """
    Names and bounds that drive the daily update.

    frozen=True makes instances hashable so classification can be cached
    per (name, rules) pair.
    """

    min_quality: int = MIN_ITEM_QUALITY
    max_quality: int = MAX_ITEM_QUALITY
    legendary_name: str = LEGENDARY_NAME
    aged_name: str = AGED_NAME
    backstage_prefix: str = BACKSTAGE_PREFIX
    conjured_prefix: str = CONJURED_PREFIX

    def __post_init__(self):
        if self.min_quality > self.max_quality:
            raise ValueError(
                f"min_quality ({self.min_quality}) exceeds "
                f"max_quality ({self.max_quality})"
            )

    def clamp_up(self, quality: int) -> int:
        return min(quality, self.max_quality)

    def clamp_down(self, quality: int) -> int:
        return max(quality, self.min_quality)


DEFAULT_RULES = RuleSet()


@lru_cache(maxsize=1024)
def classify(name: str, rules: RuleSet = DEFAULT_RULES) -> Category:
    """
    Map an item name to its category.

    Rules are checked in Category order and the first match wins.
    Unknown names are Regular.
    """
    if name == rules.legendary_name:
        return Category.LEGENDARY
    if name.startswith(rules.backstage_prefix):
        return Category.BACKSTAGE_PASS
    if name == rules.aged_name:
        return Category.AGED
    if name.startswith(rules.conjured_prefix):
        return Category.CONJURED
    return Category.REGULAR
