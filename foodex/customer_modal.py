"""Customer details entry modal."""

from __future__ import annotations

from typing import Mapping

from foodex.form_modal import FieldFormModal
from foodex.models import CustomerDetails
from foodex.validation import CUSTOMER_FIELDS, validate_customer_form


class CustomerModal(FieldFormModal[CustomerDetails | None]):
    """Prompt for name, phone and address; all three are required."""

    FORM_TITLE = "Customer Details"
    FIELDS = CUSTOMER_FIELDS

    def __init__(self, customer: CustomerDetails | None = None) -> None:
        customer = customer or CustomerDetails()
        super().__init__({"name": customer.name, "phone": customer.phone, "address": customer.address})

    def validate(self, values: Mapping[str, str]) -> dict[str, str]:
        return validate_customer_form(values)

    def build_result(self, values: Mapping[str, str]) -> CustomerDetails:
        return CustomerDetails(
            name=values["name"].strip(),
            phone=values["phone"].strip(),
            address=values["address"].strip(),
        )
