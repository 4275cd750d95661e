"""Daily quality rules, one per item category"""

import logging

from .models import MAX_QUALITY, MIN_QUALITY, Item, ItemCategory

logger = logging.getLogger(__name__)

# Backstage pass thresholds (days before the concert)
TICKET_DOUBLE_WINDOW = 10
TICKET_TRIPLE_WINDOW = 5


def mundane_quality(sell_in: int, quality: int) -> int:
    """-1 per day, -2 once the sell-by date has passed. Never drops below 0."""
    if quality > 0:
        quality -= 1
    if sell_in <= 0 and quality > 0:
        quality -= 1
    return quality


def aging_quality(sell_in: int, quality: int) -> int:
    """+1 per day, +2 once the sell-by date has passed."""
    if sell_in > 0:
        return quality + 1
    return quality + 2


def event_ticket_quality(sell_in: int, quality: int) -> int:
    """+1, +2 within 10 days, +3 within 5 days. The caller zeroes it after the event."""
    if sell_in <= TICKET_TRIPLE_WINDOW:
        return quality + 3
    if sell_in <= TICKET_DOUBLE_WINDOW:
        return quality + 2
    return quality + 1


def clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, quality))


def apply_daily_update(item: Item) -> None:
    """Advance a single item by one day, in place.

    Order: category rule -> clamp to [0, 50] -> sell_in - 1.
    Every threshold test sees the sell_in from before today's decrement.
    Legendary items are left untouched.
    """
    category = item.category
    if category is ItemCategory.LEGENDARY:
        return

    if category is ItemCategory.AGING:
        quality = aging_quality(item.sell_in, item.quality)
    elif category is ItemCategory.EVENT_TICKET:
        quality = event_ticket_quality(item.sell_in, item.quality)
    else:
        quality = mundane_quality(item.sell_in, item.quality)

    quality = clamp_quality(quality)

    if category is ItemCategory.EVENT_TICKET and item.sell_in <= 0:
        if quality > 0:
            logger.debug("Event passed for %s, quality dropped to 0", item.name)
        quality = 0

    item.quality = quality
    item.sell_in -= 1
