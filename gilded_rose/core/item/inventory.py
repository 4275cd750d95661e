"""Inventory updater: runs the daily rules over a shared item list"""

import logging

from .models import Item
from .rules import apply_daily_update

logger = logging.getLogger(__name__)


class InventoryUpdater:
    """
    Holds the caller's item list (same list object, no copies) and
    ages every item in list order. Changes are visible on the caller's items.
    """

    def __init__(self, items: list[Item]) -> None:
        # construction does not validate; out-of-range quality is clamped on the next update
        self._items = items

    @property
    def items(self) -> tuple[Item, ...]:
        """Read-only ordered view over the held items."""
        return tuple(self._items)

    def advance_one_day(self) -> None:
        for item in self._items:
            apply_daily_update(item)

    def advance(self, n_days: int) -> None:
        """Run advance_one_day() n_days times. 0 is a no-op."""
        if n_days < 0:
            raise ValueError(f"n_days must be non-negative, got {n_days}")

        for day in range(n_days):
            self.advance_one_day()
            logger.debug("Advanced %d item(s), day %d/%d", len(self._items), day + 1, n_days)
