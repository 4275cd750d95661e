"""Daily text report"""

from collections.abc import Iterable

from .inventory import InventoryUpdater
from .models import Item

HEADER = "name, sellIn, quality"


def render_day(day: int, items: Iterable[Item]) -> str:
    """Header, one line per item, then an empty line."""
    lines = [f"-------- day {day} --------", HEADER]
    lines.extend(str(item) for item in items)
    return "\n".join(lines) + "\n\n"


def render_report(updater: InventoryUpdater, days: int) -> str:
    """Render day 0 (current state) through day days-1, advancing the updater between days.

    The updater ends up days-1 days later than it started.
    """
    chunks = []
    for day in range(days):
        if day > 0:
            updater.advance_one_day()
        chunks.append(render_day(day, updater.items))
    return "".join(chunks)
