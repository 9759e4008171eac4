"""Shared fixtures for the update engine tests."""

import pytest

from gilded_rose import Inventory, Item

LEGENDARY = "Sulfuras, Hand of Ragnaros"
AGED = "Aged Brie"
PASS = "Backstage passes to a TAFKAL80ETC concert"
CONJURED = "Conjured Mana Cake"


def advance(inventory: Inventory, days: int) -> Inventory:
    for _ in range(days):
        inventory.update_quality()
    return inventory


@pytest.fixture
def make_inventory():
    """Build an Inventory from (name, sell_in, quality) triples."""

    def _make(*triples, rules=None):
        return Inventory([Item(*t) for t in triples], rules=rules)

    return _make
