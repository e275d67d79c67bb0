"""Static menu catalog and search."""

from __future__ import annotations

from decimal import Decimal

from foodex.constant import CATEGORY_BADGES, CATEGORY_HOTKEYS, MENU_ITEMS
from foodex.models import MenuItem

MENU_CATALOG: tuple[MenuItem, ...] = tuple(
    MenuItem(
        item_id=int(raw["id"]),  # type: ignore[call-overload]
        name=str(raw["name"]),
        price=Decimal(str(raw["price"])),
        category=str(raw["category"]),
        aliases=tuple(raw.get("aliases", ())),  # type: ignore[arg-type]
    )
    for raw in MENU_ITEMS
)

CATEGORY_ORDER: list[str] = list(CATEGORY_HOTKEYS.values())

MENU_BY_CATEGORY: dict[str, list[MenuItem]] = {
    category: [item for item in MENU_CATALOG if item.category == category] for category in CATEGORY_ORDER
}

_MENU_BY_ID: dict[int, MenuItem] = {item.item_id: item for item in MENU_CATALOG}


def menu_item_by_id(item_id: int) -> MenuItem | None:
    """Look up a catalog entry by its identifier."""
    return _MENU_BY_ID.get(item_id)


def category_for_hotkey(key: str) -> str | None:
    """Map a main-screen hotkey to its category label."""
    return CATEGORY_HOTKEYS.get(key.lower())


def badge_for_category(category: str) -> str:
    """Return the one-letter badge for a category (first letter when unknown)."""
    return CATEGORY_BADGES.get(category, category[:1].upper())


def search_menu(category: str, query: str) -> list[MenuItem]:
    """Case-insensitive match on name or alias within one category."""
    source = MENU_BY_CATEGORY.get(category, [])
    q = query.strip().lower()
    if not q:
        return list(source)
    return [
        item
        for item in source
        if q in item.name.lower() or any(alias.lower().startswith(q) for alias in item.aliases)
    ]
