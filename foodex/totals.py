"""Order totals and money formatting."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from foodex.config import CURRENCY_SYMBOL

_ZERO = Decimal("0")
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Totals:
    """Billable figures derived from an order."""

    subtotal: Decimal
    discount: Decimal
    delivery_charge: Decimal
    total: Decimal


def to_decimal(value: object) -> Decimal:
    """
    Coerce a price-like value to Decimal.

    Floats go through str() so 5.99 becomes Decimal("5.99") rather than its
    binary expansion. None, malformed text and non-finite values become zero.
    """
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return _ZERO
    if not result.is_finite():
        return _ZERO
    return result


def _price_of(item: object) -> Decimal:
    if isinstance(item, Mapping):
        return to_decimal(item.get("price"))
    return to_decimal(getattr(item, "price", None))


def calculate_totals(
    items: Iterable[object] | None = None,
    discount: object = None,
    delivery_charge: object = None,
) -> Totals:
    """Compute subtotal and total; never raises on empty or malformed input."""
    if items is None or isinstance(items, (Mapping, str, bytes)) or not isinstance(items, Iterable):
        items = ()
    subtotal = sum((_price_of(item) for item in items), _ZERO)
    discount_value = to_decimal(discount)
    delivery_value = to_decimal(delivery_charge)
    return Totals(
        subtotal=subtotal,
        discount=discount_value,
        delivery_charge=delivery_value,
        total=subtotal - discount_value + delivery_value,
    )


def format_money(amount: object) -> str:
    """Round half-up to cents and prefix the currency symbol."""
    value = to_decimal(amount)
    with localcontext() as ctx:
        # Leave room for every integer digit plus the two cents places.
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(_CENT, rounding=ROUND_HALF_UP)
    if value < 0:
        return f"-{CURRENCY_SYMBOL}{value.copy_negate()}"
    return f"{CURRENCY_SYMBOL}{value}"
