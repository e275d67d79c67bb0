"""Form-boundary validation for customer details and money adjustments."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Mapping

from foodex.config import CURRENCY_SYMBOL

CUSTOMER_FIELDS: tuple[str, ...] = ("name", "phone", "address")

FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "phone": "Phone",
    "address": "Address",
    "discount": "Discount",
    "delivery_charge": "Delivery charge",
}

_AMOUNT_RE = re.compile(r"^\d+(\.\d{1,2})?$|^\.\d{1,2}$")


def validate_customer_form(values: Mapping[str, str]) -> dict[str, str]:
    """Return field -> error message for every blank required field."""
    errors: dict[str, str] = {}
    for field_name in CUSTOMER_FIELDS:
        if not values.get(field_name, "").strip():
            errors[field_name] = f"{FIELD_LABELS[field_name]} is required."
    return errors


def parse_amount(text: str) -> Decimal:
    """
    Parse a non-negative money amount typed at the counter.

    Accepts an optional leading currency symbol and at most two decimals.
    Blank input means zero.
    """
    raw = text.strip()
    if raw.startswith(CURRENCY_SYMBOL):
        raw = raw[len(CURRENCY_SYMBOL) :].strip()
    if not raw:
        return Decimal("0")
    if not _AMOUNT_RE.match(raw):
        raise ValueError(f"Invalid amount: {text!r}")
    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {text!r}") from exc


def validate_adjustments_form(values: Mapping[str, str]) -> dict[str, str]:
    """Return field -> error message for amounts that do not parse."""
    errors: dict[str, str] = {}
    for field_name in ("discount", "delivery_charge"):
        try:
            parse_amount(values.get(field_name, ""))
        except ValueError:
            errors[field_name] = f"{FIELD_LABELS[field_name]} must be an amount like 2.50."
    return errors
