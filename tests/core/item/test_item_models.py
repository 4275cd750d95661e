"""Item model + category classification tests"""

from __future__ import annotations

import pytest

from gilded_rose.core.item.models import Item, ItemCategory, classify_item


class TestClassifyItem:
    @pytest.mark.parametrize(
        "name,category",
        [
            ("Sulfuras, Hand of Ragnaros", ItemCategory.LEGENDARY),
            ("Aged Brie", ItemCategory.AGING),
            ("Backstage passes to a TAFKAL80ETC concert", ItemCategory.EVENT_TICKET),
            ("+5 Dexterity Vest", ItemCategory.MUNDANE),
            ("foo", ItemCategory.MUNDANE),
        ],
    )
    def test_known_names(self, name: str, category: ItemCategory) -> None:
        assert classify_item(name) is category

    def test_conjured_is_mundane(self) -> None:
        assert classify_item("Conjured Mana Cake") is ItemCategory.MUNDANE

    def test_exact_match_only(self) -> None:
        # near misses fall through to mundane
        assert classify_item("aged brie") is ItemCategory.MUNDANE
        assert classify_item("Sulfuras") is ItemCategory.MUNDANE
        assert classify_item("Backstage passes to a Metallica concert") is ItemCategory.MUNDANE


class TestItem:
    def test_render(self) -> None:
        item = Item("+5 Dexterity Vest", 10, 20)
        assert str(item) == "+5 Dexterity Vest, 10, 20"

    def test_render_negative_values(self) -> None:
        assert str(Item("foo", -3, 0)) == "foo, -3, 0"

    def test_category_assigned_at_construction(self) -> None:
        assert Item("Aged Brie", 2, 0).category is ItemCategory.AGING
        assert Item("Sulfuras, Hand of Ragnaros", 0, 80).is_legendary
        assert not Item("foo", 0, 0).is_legendary

    def test_name_is_read_only(self) -> None:
        item = Item("foo", 0, 0)
        with pytest.raises(AttributeError):
            item.name = "bar"
        assert item.name == "foo"

    def test_category_is_read_only(self) -> None:
        item = Item("foo", 0, 0)
        with pytest.raises(AttributeError):
            item.category = ItemCategory.LEGENDARY
        assert item.category is ItemCategory.MUNDANE

    def test_sell_in_and_quality_are_mutable(self) -> None:
        item = Item("foo", 1, 1)
        item.sell_in = 0
        item.quality = 5
        assert (item.sell_in, item.quality) == (0, 5)

    def test_no_validation_on_construction(self) -> None:
        # out-of-range quality is kept until the next update
        assert Item("foo", 5, 60).quality == 60
        assert Item("foo", 5, -4).quality == -4
