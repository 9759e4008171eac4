"""Command-line fixture that prints the inventory day by day."""

import argparse
import time

from gilded_rose.inventory import Inventory
from gilded_rose.item import Item
from gilded_rose.rules import MAX_ITEM_QUALITY, MIN_ITEM_QUALITY, RuleSet


def default_items() -> list[Item]:
    """The demonstration stock, one or more items per category."""
    return [
        Item(name="+5 Dexterity Vest", sell_in=10, quality=20),
        Item(name="Aged Brie", sell_in=2, quality=0),
        Item(name="Elixir of the Mongoose", sell_in=5, quality=7),
        Item(name="Sulfuras, Hand of Ragnaros", sell_in=0, quality=80),
        Item(name="Sulfuras, Hand of Ragnaros", sell_in=-1, quality=80),
        Item(name="Backstage passes to a TAFKAL80ETC concert", sell_in=15, quality=20),
        Item(name="Backstage passes to a TAFKAL80ETC concert", sell_in=10, quality=49),
        Item(name="Backstage passes to a TAFKAL80ETC concert", sell_in=5, quality=49),
        Item(name="Conjured Mana Cake", sell_in=3, quality=6),
    ]


def render_day(day: int, inventory: Inventory) -> list[str]:
    lines = [f"-------- day {day} --------", "name, sellIn, quality"]
    lines.extend(str(item) for item in inventory)
    lines.append("")
    return lines


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Gilded Rose inventory fixture")
    parser.add_argument(
        "--days", type=int, default=2, help="Days to print (default: 2)"
    )
    parser.add_argument(
        "--min-quality",
        type=int,
        default=MIN_ITEM_QUALITY,
        help=f"Lower quality bound (default: {MIN_ITEM_QUALITY})",
    )
    parser.add_argument(
        "--max-quality",
        type=int,
        default=MAX_ITEM_QUALITY,
        help=f"Upper quality bound (default: {MAX_ITEM_QUALITY})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print timing information"
    )

    args = parser.parse_args(argv)

    if args.days < 0:
        parser.error("--days must be non-negative")
    if args.min_quality > args.max_quality:
        parser.error("--min-quality must not exceed --max-quality")

    rules = RuleSet(min_quality=args.min_quality, max_quality=args.max_quality)
    inventory = Inventory(default_items(), rules=rules)

    start_time = time.time()

    for day in range(args.days):
        print("\n".join(render_day(day, inventory)))
        inventory.update_quality()

    if args.verbose:
        elapsed = time.time() - start_time
        print(f"Completed {args.days} days in {elapsed:.4f} seconds")


if __name__ == "__main__":
    main()
