"""Inventory Service — connects callers (API, CLI) to the item core

The service owns no items between calls; each simulation builds its own updater.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from gilded_rose.config import settings
from gilded_rose.core.item.catalog import load_items_from_json
from gilded_rose.core.item.inventory import InventoryUpdater
from gilded_rose.core.item.models import Item
from gilded_rose.core.logging import get_logger

logger = get_logger(__name__)

# (name, sell_in, quality)
ItemTriple = tuple[str, int, int]


@dataclass(frozen=True)
class ItemSnapshot:
    """Copy of an item's state at one point in time."""

    name: str
    sell_in: int
    quality: int
    category: str
    display: str  # Item.__str__ at capture time

    @classmethod
    def of(cls, item: Item) -> ItemSnapshot:
        return cls(
            name=item.name,
            sell_in=item.sell_in,
            quality=item.quality,
            category=item.category.value,
            display=str(item),
        )


@dataclass
class SimulationResult:
    days: int
    items: list[ItemSnapshot]
    history: list[list[ItemSnapshot]] = field(default_factory=list)  # day 0 = initial


class InventoryService:
    """Simulation entry points over InventoryUpdater"""

    def __init__(
        self,
        seed_path: str | Path | None = None,
        max_days: int | None = None,
    ):
        self._seed_path = Path(seed_path or settings.SEED_ITEMS_PATH)
        self._max_days = max_days if max_days is not None else settings.MAX_SIMULATION_DAYS

    # === Construction ===

    def build_updater(self, triples: Iterable[ItemTriple]) -> InventoryUpdater:
        """Items are built as given. Quality is not checked here."""
        items = [Item(name, sell_in, quality) for name, sell_in, quality in triples]
        return InventoryUpdater(items)

    def load_seed(self) -> list[Item]:
        """Fresh Item objects from the seed catalogue on every call."""
        return load_items_from_json(self._seed_path)

    # === Simulation ===

    def simulate(
        self,
        triples: Iterable[ItemTriple],
        days: int,
        include_history: bool = False,
    ) -> SimulationResult:
        """Age the given items by `days` days.

        With include_history, history holds days+1 snapshot lists,
        the initial state first.

        Raises:
            ValueError: days is negative or above the configured maximum.
        """
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")
        if days > self._max_days:
            raise ValueError(f"days must be at most {self._max_days}, got {days}")

        updater = self.build_updater(triples)
        history: list[list[ItemSnapshot]] = []

        if include_history:
            history.append([ItemSnapshot.of(i) for i in updater.items])
            for _ in range(days):
                updater.advance_one_day()
                history.append([ItemSnapshot.of(i) for i in updater.items])
        else:
            updater.advance(days)

        logger.info(
            "Simulated %d day(s) over %d item(s)", days, len(updater.items)
        )
        return SimulationResult(
            days=days,
            items=[ItemSnapshot.of(i) for i in updater.items],
            history=history,
        )
