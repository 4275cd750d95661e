"""Item system core: pure Python, no I/O"""

from .models import Item, ItemCategory, classify_item
from .inventory import InventoryUpdater
from .catalog import load_items_from_json
from .report import render_day, render_report

__all__ = [
    "Item",
    "ItemCategory",
    "classify_item",
    "InventoryUpdater",
    "load_items_from_json",
    "render_day",
    "render_report",
]
