"""Seed catalogue: load the opening stock from JSON"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import Item

logger = logging.getLogger(__name__)


def _parse_int(value: object) -> int:
    # bool is an int subclass; "true" is not a day count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected integer, got {value!r}")
    return value


def load_items_from_json(path: str | Path) -> list[Item]:
    """Load seed items. Order in the file is kept.

    Each entry: {"name": str, "sell_in": int, "quality": int}.
    Broken entries are skipped with a warning.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw_list: list[dict] = json.load(f)

    items: list[Item] = []
    for raw in raw_list:
        try:
            items.append(
                Item(
                    name=str(raw["name"]),
                    sell_in=_parse_int(raw["sell_in"]),
                    quality=_parse_int(raw["quality"]),
                )
            )
        except (KeyError, ValueError, TypeError) as e:
            name = raw.get("name", "?") if isinstance(raw, dict) else "?"
            logger.warning("Failed to load item: %s (%s)", name, e)

    logger.info("Loaded %d items from %s", len(items), path)
    return items
