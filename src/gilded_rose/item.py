"""Item record."""

from dataclasses import dataclass


@dataclass
class Item:
    """
    A single stock line.

    sell_in counts days left before the sell-by date and may go negative.
    quality is the item's current value. name picks the rule category and
    cannot be reassigned once set.
    """

    name: str
    sell_in: int
    quality: int

    def __setattr__(self, key, value):
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("Item name cannot be changed after creation")
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"
