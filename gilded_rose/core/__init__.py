"""Gilded Rose core"""
__version__ = "0.1.0"

from gilded_rose.core.item import (
    InventoryUpdater,
    Item,
    ItemCategory,
    classify_item,
    load_items_from_json,
    render_day,
    render_report,
)

__all__ = [
    "InventoryUpdater",
    "Item",
    "ItemCategory",
    "classify_item",
    "load_items_from_json",
    "render_day",
    "render_report",
]
