"""Receipt layout shared by the on-screen preview and the thermal printer."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from foodex.config import RECEIPT_COLUMNS, SHOP_NAME, SHOP_TAGLINE
from foodex.data import CATEGORY_ORDER
from foodex.models import OrderLineItem, OrderSnapshot
from foodex.totals import Totals, calculate_totals, format_money

TITLE = "title"
CENTER = "center"
TEXT = "text"
ROW = "row"
TOTAL = "total"
SEPARATOR = "separator"


@dataclass(frozen=True)
class ReceiptLine:
    """One receipt row: a style plus left text and optional right-aligned text."""

    style: str
    left: str = ""
    right: str = ""


@dataclass
class _GroupedReceiptRow:
    item: OrderLineItem
    count: int
    first_seen_index: int

    @property
    def amount(self) -> Decimal:
        return self.item.price * self.count


def _category_rank(category: str) -> int:
    if category in CATEGORY_ORDER:
        return CATEGORY_ORDER.index(category)
    return len(CATEGORY_ORDER)


def group_receipt_rows(items: tuple[OrderLineItem, ...] | list[OrderLineItem]) -> list[_GroupedReceiptRow]:
    """Collapse identical line items for display and sort them by category."""
    groups: dict[tuple[int, str, Decimal], _GroupedReceiptRow] = {}
    for idx, item in enumerate(items):
        key = (item.item_id, item.name, item.price)
        row = groups.get(key)
        if row is not None:
            row.count += 1
            continue
        groups[key] = _GroupedReceiptRow(item=item, count=1, first_seen_index=idx)

    rows = list(groups.values())
    rows.sort(key=lambda row: (_category_rank(row.item.category), row.first_seen_index))
    return rows


def _item_label(row: _GroupedReceiptRow) -> str:
    if row.count <= 1:
        return row.item.name
    return f"{row.count}x {row.item.name}"


def _wrapped(prefix: str, value: str, columns: int) -> list[ReceiptLine]:
    wrapped = textwrap.wrap(f"{prefix}{value.strip()}", width=columns, subsequent_indent="  ") or [prefix]
    return [ReceiptLine(TEXT, line) for line in wrapped]


def build_receipt(
    snapshot: OrderSnapshot,
    totals: Totals | None = None,
    printed_at: datetime | None = None,
    columns: int = RECEIPT_COLUMNS,
) -> list[ReceiptLine]:
    """Lay out the full receipt for a snapshot."""
    if totals is None:
        totals = calculate_totals(snapshot.items, snapshot.discount, snapshot.delivery_charge)
    if printed_at is None:
        printed_at = datetime.now()

    lines: list[ReceiptLine] = [
        ReceiptLine(TITLE, SHOP_NAME),
        ReceiptLine(CENTER, SHOP_TAGLINE),
        ReceiptLine(TEXT, printed_at.strftime("Date: %Y-%m-%d %H:%M")),
        ReceiptLine(SEPARATOR),
    ]

    customer = snapshot.customer
    lines.extend(_wrapped("Name: ", customer.name, columns))
    lines.extend(_wrapped("Phone: ", customer.phone, columns))
    lines.extend(_wrapped("Address: ", customer.address, columns))
    lines.append(ReceiptLine(SEPARATOR))

    grouped = group_receipt_rows(snapshot.items)
    if not grouped:
        lines.append(ReceiptLine(TEXT, "(no items)"))
    for row in grouped:
        lines.append(ReceiptLine(ROW, _item_label(row), format_money(row.amount)))
    lines.append(ReceiptLine(SEPARATOR))

    lines.append(ReceiptLine(ROW, "Subtotal", format_money(totals.subtotal)))
    if totals.discount:
        lines.append(ReceiptLine(ROW, "Discount", format_money(-totals.discount)))
    if totals.delivery_charge:
        lines.append(ReceiptLine(ROW, "Delivery", format_money(totals.delivery_charge)))
    lines.append(ReceiptLine(TOTAL, "TOTAL", format_money(totals.total)))
    lines.append(ReceiptLine(SEPARATOR))
    lines.append(ReceiptLine(CENTER, "Thank you!"))
    return lines


def _fit(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return f"{text[: width - 3]}..."


def format_receipt_line(line: ReceiptLine, columns: int = RECEIPT_COLUMNS) -> str:
    if line.style == SEPARATOR:
        return "-" * columns
    if line.style in {TITLE, CENTER}:
        return _fit(line.left, columns).center(columns).rstrip()
    if line.style in {ROW, TOTAL}:
        right = _fit(line.right, columns)
        left = _fit(line.left, columns - len(right) - 1)
        return f"{left}{' ' * (columns - len(left) - len(right))}{right}"
    return _fit(line.left, columns)


def format_receipt_text(lines: list[ReceiptLine], columns: int = RECEIPT_COLUMNS) -> str:
    """Render receipt lines as fixed-width plain text."""
    return "\n".join(format_receipt_line(line, columns) for line in lines)
