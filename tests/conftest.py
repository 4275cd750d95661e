"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from gilded_rose.core.item.models import Item
from gilded_rose.main import app


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient with the lifespan (service wiring) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def items() -> list[Item]:
    """The classic shop stock."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item("Aged Brie", 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item("Sulfuras, Hand of Ragnaros", 0, 80),
        Item("Sulfuras, Hand of Ragnaros", -1, 80),
        Item("Backstage passes to a TAFKAL80ETC concert", 15, 20),
        Item("Backstage passes to a TAFKAL80ETC concert", 10, 49),
        Item("Backstage passes to a TAFKAL80ETC concert", 5, 49),
        # Conjured items still decay like mundane ones
        Item("Conjured Mana Cake", 3, 6),
    ]
