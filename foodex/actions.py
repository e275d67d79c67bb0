"""Mutation intents accepted by OrderStore.dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from foodex.models import MenuItem


class UnknownActionError(TypeError):
    """Raised when the store is handed something that is not an OrderAction."""


@dataclass(frozen=True)
class AddItem:
    item: MenuItem


@dataclass(frozen=True)
class RemoveItem:
    """Remove the first line item carrying this identifier."""

    item_id: int


@dataclass(frozen=True)
class RemoveLineAt:
    """Remove the line item at a position in the order."""

    index: int


@dataclass(frozen=True)
class UpdateCustomer:
    """Merge the non-None fields into the customer record."""

    name: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class SetDiscount:
    amount: Decimal


@dataclass(frozen=True)
class SetDeliveryCharge:
    amount: Decimal


@dataclass(frozen=True)
class ClearOrder:
    pass


OrderAction = AddItem | RemoveItem | RemoveLineAt | UpdateCustomer | SetDiscount | SetDeliveryCharge | ClearOrder
