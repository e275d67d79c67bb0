"""Rich rendering helpers for the counter screens."""

from __future__ import annotations

from rich.text import Text

from foodex.data import badge_for_category
from foodex.models import CustomerDetails, MenuItem, OrderLineItem
from foodex.totals import Totals, format_money


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == "Burgers":
        return "bold #ffffff on #b23a48"
    if category == "Drinks":
        return "bold #ffffff on #2f6db5"
    if category == "Desserts":
        return "bold #1f0b1a on #e3a1d0"
    return "bold #0b1f0f on #5fbf72"


def format_category_badge(category: str) -> Text:
    return Text(badge_for_category(category), style=badge_style(category))


def format_line_label(item: OrderLineItem | MenuItem) -> Text:
    """Render a row label with a colored category tag and its price."""
    text = Text()
    text.append_text(format_category_badge(item.category))
    text.append(f" {item.name}")
    text.append(f"  {format_money(item.price)}", style="dim")
    return text


def format_totals(totals: Totals) -> Text:
    """Render the running totals block under the order list."""
    text = Text()
    text.append(f"Subtotal  {format_money(totals.subtotal)}")
    if totals.discount:
        text.append(f"\nDiscount  {format_money(-totals.discount)}")
    if totals.delivery_charge:
        text.append(f"\nDelivery  {format_money(totals.delivery_charge)}")
    text.append("\nTotal     ", style="bold")
    text.append(format_money(totals.total), style="bold")
    return text


def format_customer(customer: CustomerDetails) -> Text:
    """Render the customer block; missing fields are flagged."""
    text = Text()
    for idx, (label, value) in enumerate(
        (("Name", customer.name), ("Phone", customer.phone), ("Address", customer.address))
    ):
        if idx > 0:
            text.append("\n")
        text.append(f"{label}: ", style="bold")
        if value.strip():
            text.append(value)
        else:
            text.append("(missing)", style="dim italic")
    return text
