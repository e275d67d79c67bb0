"""Editable static menu configuration."""

from __future__ import annotations

# Category label -> hotkey used to open a menu search in the main screen.
CATEGORY_HOTKEYS: dict[str, str] = {
    "b": "Burgers",
    "f": "Sides",
    "d": "Drinks",
    "e": "Desserts",
}

# Category label -> single-letter badge shown next to order rows.
CATEGORY_BADGES: dict[str, str] = {
    "Burgers": "B",
    "Sides": "F",
    "Drinks": "D",
    "Desserts": "E",
}

# Raw catalog records consumed by foodex.data (which wraps these into MenuItem instances).
# Prices are decimal strings so they convert to Decimal without float error.
MENU_ITEMS: list[dict[str, object]] = [
    {"id": 1, "name": "Classic Burger", "price": "5.99", "category": "Burgers", "aliases": ["cb", "classic"]},
    {"id": 2, "name": "Cheeseburger", "price": "6.49", "category": "Burgers", "aliases": ["chb", "cheese"]},
    {"id": 3, "name": "Double Cheeseburger", "price": "8.49", "category": "Burgers", "aliases": ["dbl", "dcb"]},
    {"id": 4, "name": "Chicken Burger", "price": "6.99", "category": "Burgers", "aliases": ["chix", "ckb"]},
    {"id": 5, "name": "Veggie Burger", "price": "6.29", "category": "Burgers", "aliases": ["veg", "vb"]},
    {"id": 6, "name": "French Fries", "price": "2.99", "category": "Sides", "aliases": ["ff", "chips"]},
    {"id": 7, "name": "Large Fries", "price": "3.79", "category": "Sides", "aliases": ["lf"]},
    {"id": 8, "name": "Onion Rings", "price": "3.49", "category": "Sides", "aliases": ["or", "rings"]},
    {"id": 9, "name": "Chicken Nuggets (6)", "price": "4.49", "category": "Sides", "aliases": ["nug", "cn"]},
    {"id": 10, "name": "Coleslaw", "price": "1.99", "category": "Sides", "aliases": ["slaw"]},
    {"id": 11, "name": "Cola", "price": "1.99", "category": "Drinks", "aliases": ["coke"]},
    {"id": 12, "name": "Lemonade", "price": "2.29", "category": "Drinks", "aliases": ["lem"]},
    {"id": 13, "name": "Iced Tea", "price": "2.19", "category": "Drinks", "aliases": ["tea", "it"]},
    {"id": 14, "name": "Bottled Water", "price": "1.29", "category": "Drinks", "aliases": ["wt", "water"]},
    {"id": 15, "name": "Vanilla Shake", "price": "3.99", "category": "Drinks", "aliases": ["vs", "shake"]},
    {"id": 16, "name": "Chocolate Sundae", "price": "2.99", "category": "Desserts", "aliases": ["cs", "sundae"]},
    {"id": 17, "name": "Apple Pie", "price": "1.89", "category": "Desserts", "aliases": ["pie", "ap"]},
    {"id": 18, "name": "Chocolate Cookie", "price": "1.49", "category": "Desserts", "aliases": ["cookie", "ck"]},
]
