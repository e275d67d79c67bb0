"""Domain models for the Foodex counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MenuItem:
    """A purchasable catalog entry."""

    item_id: int
    name: str
    price: Decimal
    category: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class OrderLineItem:
    """One instance of a catalog item placed into the order."""

    item_id: int
    name: str
    price: Decimal
    category: str

    @classmethod
    def from_menu_item(cls, item: MenuItem) -> OrderLineItem:
        return cls(item_id=item.item_id, name=item.name, price=item.price, category=item.category)


@dataclass(frozen=True)
class CustomerDetails:
    """Who the order is for. Blank fields are allowed until the form is submitted."""

    name: str = ""
    phone: str = ""
    address: str = ""

    def is_complete(self) -> bool:
        return all(value.strip() for value in (self.name, self.phone, self.address))


@dataclass
class OrderState:
    """Mutable order aggregate, owned by OrderStore."""

    items: list[OrderLineItem] = field(default_factory=list)
    customer: CustomerDetails = field(default_factory=CustomerDetails)
    discount: Decimal = Decimal("0")
    delivery_charge: Decimal = Decimal("0")


@dataclass(frozen=True)
class OrderSnapshot:
    """Read-only copy of OrderState handed to views."""

    items: tuple[OrderLineItem, ...]
    customer: CustomerDetails
    discount: Decimal
    delivery_charge: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.items
