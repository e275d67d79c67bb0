"""Tests for the static menu catalog."""
from decimal import Decimal

from foodex.data import (
    CATEGORY_ORDER,
    MENU_BY_CATEGORY,
    MENU_CATALOG,
    badge_for_category,
    category_for_hotkey,
    menu_item_by_id,
    search_menu,
)


def test_catalog_ids_are_unique():
    ids = [item.item_id for item in MENU_CATALOG]
    assert len(ids) == len(set(ids))


def test_prices_are_non_negative_decimals():
    for item in MENU_CATALOG:
        assert isinstance(item.price, Decimal)
        assert item.price >= 0


def test_every_item_belongs_to_a_known_category():
    assert sum(len(items) for items in MENU_BY_CATEGORY.values()) == len(MENU_CATALOG)
    assert set(CATEGORY_ORDER) == {item.category for item in MENU_CATALOG}


def test_lookup_by_id():
    item = menu_item_by_id(1)
    assert item is not None
    assert item.name == "Classic Burger"
    assert item.price == Decimal("5.99")
    assert menu_item_by_id(-1) is None


def test_hotkeys_map_to_categories():
    assert category_for_hotkey("b") == "Burgers"
    assert category_for_hotkey("D") == "Drinks"
    assert category_for_hotkey("z") is None


def test_search_by_name_and_alias():
    assert [item.name for item in search_menu("Burgers", "cheese")] == ["Cheeseburger", "Double Cheeseburger"]
    assert [item.name for item in search_menu("Burgers", "chb")] == ["Cheeseburger"]
    assert [item.name for item in search_menu("Drinks", "coke")] == ["Cola"]


def test_search_with_empty_query_returns_category():
    assert search_menu("Desserts", "") == MENU_BY_CATEGORY["Desserts"]
    assert search_menu("Unknown", "x") == []


def test_badges():
    assert badge_for_category("Sides") == "F"
    assert badge_for_category("Specials") == "S"
