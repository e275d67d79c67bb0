"""Discount and delivery charge entry modal."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from foodex.config import CURRENCY_SYMBOL
from foodex.form_modal import FieldFormModal
from foodex.validation import parse_amount, validate_adjustments_form


class AdjustmentsModal(FieldFormModal[tuple[Decimal, Decimal] | None]):
    """Prompt for discount and delivery charge. Blank means zero."""

    FORM_TITLE = "Discount / Delivery"
    FIELDS = ("discount", "delivery_charge")
    MAX_LENGTH = 8
    HELP = "Digits and '.' only. Tab/↑/↓ switch field. Enter confirm. Esc cancel."

    def __init__(self, discount: Decimal = Decimal("0"), delivery_charge: Decimal = Decimal("0")) -> None:
        super().__init__(
            {
                "discount": str(discount) if discount else "",
                "delivery_charge": str(delivery_charge) if delivery_charge else "",
            }
        )

    def accepts_character(self, character: str) -> bool:
        return character.isdigit() or character in {".", CURRENCY_SYMBOL}

    def validate(self, values: Mapping[str, str]) -> dict[str, str]:
        return validate_adjustments_form(values)

    def build_result(self, values: Mapping[str, str]) -> tuple[Decimal, Decimal]:
        return (parse_amount(values["discount"]), parse_amount(values["delivery_charge"]))
