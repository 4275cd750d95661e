"""Item domain model (no I/O)"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MIN_QUALITY = 0
MAX_QUALITY = 50

# Category lookup lists, matched against the exact item name.
LEGENDARY_ITEMS: tuple[str, ...] = ("Sulfuras, Hand of Ragnaros",)
AGING_ITEMS: tuple[str, ...] = ("Aged Brie",)
EVENT_TICKET_ITEMS: tuple[str, ...] = ("Backstage passes to a TAFKAL80ETC concert",)


class ItemCategory(str, Enum):
    MUNDANE = "mundane"
    AGING = "aging"
    EVENT_TICKET = "event_ticket"
    LEGENDARY = "legendary"


def classify_item(name: str) -> ItemCategory:
    """Map an item name to its rule category.

    Anything not in a lookup list is mundane, "Conjured Mana Cake" included.
    """
    if name in LEGENDARY_ITEMS:
        return ItemCategory.LEGENDARY
    if name in AGING_ITEMS:
        return ItemCategory.AGING
    if name in EVENT_TICKET_ITEMS:
        return ItemCategory.EVENT_TICKET
    return ItemCategory.MUNDANE


@dataclass
class Item:
    """A stocked item. sell_in and quality change daily, name never does."""

    name: str
    sell_in: int  # days left before the sell-by date, may be negative
    quality: int  # [0, 50] once updated, legendary items excepted

    # derived once from name
    category: ItemCategory = field(init=False)

    def __post_init__(self) -> None:
        self.category = classify_item(self.name)

    def __setattr__(self, key: str, value: object) -> None:
        if key in ("name", "category") and key in self.__dict__:
            raise AttributeError(f"Item.{key} is read-only")
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"

    @property
    def is_legendary(self) -> bool:
        return self.category is ItemCategory.LEGENDARY
