"""Tests for the Item record and the Inventory container."""

import numpy as np
import pytest

from gilded_rose import Inventory, Item

from conftest import AGED


def test_item_str_format():
    assert str(Item("foo", 1, 3)) == "foo, 1, 3"
    assert str(Item("Elixir", -2, 0)) == "Elixir, -2, 0"


def test_item_name_is_immutable():
    item = Item("foo", 1, 3)
    with pytest.raises(AttributeError):
        item.name = "bar"
    assert item.name == "foo"


def test_item_numbers_are_mutable():
    item = Item("foo", 1, 3)
    item.sell_in = -4
    item.quality = 99
    assert (item.sell_in, item.quality) == (-4, 99)


def test_items_compare_by_value():
    assert Item("foo", 1, 3) == Item("foo", 1, 3)
    assert Item("foo", 1, 3) != Item("foo", 1, 2)


def test_out_of_range_values_accepted_at_construction():
    item = Item("foo", 0, -10)
    assert item.quality == -10
    item = Item(AGED, 0, 500)
    assert item.quality == 500


def test_inventory_shares_caller_list():
    items = [Item("foo", 1, 3)]
    inventory = Inventory(items)
    inventory.update_quality()
    assert items[0].sell_in == 0
    assert inventory.items is items


def test_inventory_preserves_order_and_duplicates(make_inventory):
    inventory = make_inventory(("foo", 1, 3), (AGED, 1, 3), ("foo", 1, 3))
    assert len(inventory) == 3
    assert [item.name for item in inventory] == ["foo", AGED, "foo"]
    inventory.update_quality()
    assert inventory[0] == inventory[2]
    assert inventory[1].quality == 4


def test_inventory_snapshot(make_inventory):
    inventory = make_inventory(("foo", 1, 3), (AGED, 5, 10))
    snap = inventory.snapshot()
    assert snap.shape == (2, 2)
    np.testing.assert_array_equal(snap, [[1, 3], [5, 10]])


def test_snapshot_holds_int64_extremes(make_inventory):
    limit = np.iinfo(np.int64)
    inventory = make_inventory(("foo", limit.min, limit.max))
    np.testing.assert_array_equal(inventory.snapshot(), [[limit.min, limit.max]])


def test_snapshot_rejects_values_beyond_int64(make_inventory):
    inventory = make_inventory(("foo", 0, 2**70))
    with pytest.raises(OverflowError):
        inventory.snapshot()
    # The item itself is still updated with unbounded integers
    inventory.update_quality()
    assert inventory[0].quality == 2**70 - 2


def test_empty_inventory(make_inventory):
    inventory = make_inventory()
    inventory.update_quality()
    assert len(inventory) == 0
    assert inventory.snapshot().shape == (0, 2)
