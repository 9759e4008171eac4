"""Multi-day simulation with recorded history."""

from dataclasses import dataclass

import numpy as np

from gilded_rose.engine import UpdateEngine
from gilded_rose.inventory import snapshot
from gilded_rose.item import Item
from gilded_rose.rules import DEFAULT_RULES, Category, RuleSet, classify


@dataclass
class SimulationHistory:
    """State of every item at the end of each simulated day."""

    names: list[str]
    categories: list[Category]

    # Row d holds the state after d updates; row 0 is the starting state
    sell_in: np.ndarray
    quality: np.ndarray

    @property
    def n_days(self) -> int:
        return self.sell_in.shape[0] - 1

    def day(self, n: int) -> list[tuple[str, int, int]]:
        """(name, sell_in, quality) for every item after n updates."""
        return [
            (name, int(sell_in), int(quality))
            for name, sell_in, quality in zip(
                self.names, self.sell_in[n], self.quality[n]
            )
        ]

    def quality_in_bounds(self, rules: RuleSet | None = None) -> np.ndarray:
        """
        Boolean mask of shape (n_days + 1, n_items).

        Entries are True where the quality lies within the rule bounds.
        Legendary items are exempt from bounding and are always True.
        """
        rules = rules if rules is not None else DEFAULT_RULES
        within = (self.quality >= rules.min_quality) & (
            self.quality <= rules.max_quality
        )
        exempt = np.array(
            [category is Category.LEGENDARY for category in self.categories],
            dtype=bool,
        )
        return within | exempt


def simulate(
    items: list[Item],
    days: int,
    rules: RuleSet | None = None,
    verbose: bool = False,
) -> SimulationHistory:
    """
    Advance items day by day, recording the state after each update.

    Items are mutated in place exactly as repeated calls to
    advance_one_day would.

    Args:
        items: Items to age
        days: Number of updates to apply
        rules: Rule set for the engine (defaults to DEFAULT_RULES)
        verbose: Print one progress line per day

    Returns:
        SimulationHistory with (days + 1, n_items) sell_in and quality arrays
    """
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")

    engine = UpdateEngine(rules)
    n_items = len(items)

    history = np.zeros((days + 1, n_items, 2), dtype=np.int64)
    history[0] = snapshot(items)

    for day in range(1, days + 1):
        engine.advance_one_day(items)
        history[day] = snapshot(items)

        if verbose and n_items:
            mean_quality = history[day, :, 1].mean()
            print(f"  Day {day}/{days}: mean quality {mean_quality:.2f}")

    return SimulationHistory(
        names=[item.name for item in items],
        categories=[classify(item.name, engine.rules) for item in items],
        sell_in=history[:, :, 0],
        quality=history[:, :, 1],
    )
