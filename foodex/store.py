"""In-memory order store: the single mutation surface for the current order."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from foodex.actions import (
    AddItem,
    ClearOrder,
    OrderAction,
    RemoveItem,
    RemoveLineAt,
    SetDeliveryCharge,
    SetDiscount,
    UnknownActionError,
    UpdateCustomer,
)
from foodex.models import CustomerDetails, MenuItem, OrderLineItem, OrderSnapshot, OrderState
from foodex.totals import Totals, calculate_totals, to_decimal

logger = logging.getLogger(__name__)

Listener = Callable[[OrderSnapshot], None]


class OrderStore:
    """
    Owns the OrderState for one counter session.

    Every change goes through dispatch(); readers get immutable snapshots.
    Listeners are called synchronously after each applied action.
    """

    def __init__(self, state: OrderState | None = None) -> None:
        if state is None:
            state = OrderState()
        # Copy so callers cannot mutate the order behind the store.
        self._state = OrderState(
            items=list(state.items),
            customer=state.customer,
            discount=to_decimal(state.discount),
            delivery_charge=to_decimal(state.delivery_charge),
        )
        self._listeners: list[Listener] = []

    def dispatch(self, action: OrderAction) -> OrderSnapshot:
        """Apply one action and notify listeners."""
        if isinstance(action, AddItem):
            self._state.items.append(OrderLineItem.from_menu_item(action.item))
        elif isinstance(action, RemoveItem):
            self._remove_first(action.item_id)
        elif isinstance(action, RemoveLineAt):
            if 0 <= action.index < len(self._state.items):
                del self._state.items[action.index]
        elif isinstance(action, UpdateCustomer):
            changes = {
                key: value
                for key, value in (("name", action.name), ("phone", action.phone), ("address", action.address))
                if value is not None
            }
            self._state.customer = replace(self._state.customer, **changes)
        elif isinstance(action, SetDiscount):
            self._state.discount = to_decimal(action.amount)
        elif isinstance(action, SetDeliveryCharge):
            self._state.delivery_charge = to_decimal(action.amount)
        elif isinstance(action, ClearOrder):
            self._state = OrderState()
        else:
            raise UnknownActionError(f"Unsupported order action: {action!r}")

        logger.debug("dispatch %s items=%d", type(action).__name__, len(self._state.items))
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def _remove_first(self, item_id: int) -> None:
        for idx, line in enumerate(self._state.items):
            if line.item_id == item_id:
                del self._state.items[idx]
                return

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            items=tuple(self._state.items),
            customer=self._state.customer,
            discount=self._state.discount,
            delivery_charge=self._state.delivery_charge,
        )

    def totals(self) -> Totals:
        snapshot = self.snapshot()
        return calculate_totals(snapshot.items, snapshot.discount, snapshot.delivery_charge)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Convenience wrappers used by the UI.

    def add_item(self, item: MenuItem) -> OrderSnapshot:
        return self.dispatch(AddItem(item))

    def remove_item(self, item_id: int) -> OrderSnapshot:
        return self.dispatch(RemoveItem(item_id))

    def remove_line_at(self, index: int) -> OrderSnapshot:
        return self.dispatch(RemoveLineAt(index))

    def update_customer(
        self, name: str | None = None, phone: str | None = None, address: str | None = None
    ) -> OrderSnapshot:
        return self.dispatch(UpdateCustomer(name=name, phone=phone, address=address))

    def replace_customer(self, customer: CustomerDetails) -> OrderSnapshot:
        return self.update_customer(name=customer.name, phone=customer.phone, address=customer.address)

    def set_discount(self, amount: object) -> OrderSnapshot:
        return self.dispatch(SetDiscount(to_decimal(amount)))

    def set_delivery_charge(self, amount: object) -> OrderSnapshot:
        return self.dispatch(SetDeliveryCharge(to_decimal(amount)))

    def clear(self) -> OrderSnapshot:
        return self.dispatch(ClearOrder())
