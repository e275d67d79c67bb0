"""Tests for receipt layout."""
from datetime import datetime
from decimal import Decimal

import pytest

from foodex.config import RECEIPT_COLUMNS, SHOP_NAME
from foodex.data import menu_item_by_id
from foodex.receipt import (
    ROW,
    SEPARATOR,
    TITLE,
    TOTAL,
    ReceiptLine,
    build_receipt,
    format_receipt_line,
    format_receipt_text,
    group_receipt_rows,
)
from foodex.store import OrderStore

PRINTED_AT = datetime(2026, 10, 17, 12, 30)


@pytest.fixture
def store():
    s = OrderStore()
    s.add_item(menu_item_by_id(11))  # Cola
    s.add_item(menu_item_by_id(1))  # Classic Burger
    s.add_item(menu_item_by_id(1))
    s.add_item(menu_item_by_id(6))  # French Fries
    s.update_customer(name="Jordan Lee", phone="555-0199", address="12 Harbour Road, Flat 3")
    return s


def test_grouping_collapses_duplicates_and_sorts_by_category(store):
    rows = group_receipt_rows(store.snapshot().items)
    assert [(row.item.name, row.count) for row in rows] == [
        ("Classic Burger", 2),
        ("French Fries", 1),
        ("Cola", 1),
    ]
    assert rows[0].amount == Decimal("11.98")


def test_receipt_has_header_items_and_totals(store):
    store.set_discount("2.00")
    store.set_delivery_charge("1.50")
    lines = build_receipt(store.snapshot(), store.totals(), printed_at=PRINTED_AT)

    assert lines[0] == ReceiptLine(TITLE, SHOP_NAME)
    assert ReceiptLine(ROW, "2x Classic Burger", "$11.98") in lines
    assert ReceiptLine(ROW, "Subtotal", "$16.96") in lines
    assert ReceiptLine(ROW, "Discount", "-$2.00") in lines
    assert ReceiptLine(ROW, "Delivery", "$1.50") in lines
    assert ReceiptLine(TOTAL, "TOTAL", "$16.46") in lines


def test_zero_adjustments_are_omitted(store):
    lines = build_receipt(store.snapshot(), printed_at=PRINTED_AT)
    labels = [line.left for line in lines if line.style == ROW]
    assert "Discount" not in labels
    assert "Delivery" not in labels


def test_empty_order_receipt():
    lines = build_receipt(OrderStore().snapshot(), printed_at=PRINTED_AT)
    text = format_receipt_text(lines)
    assert "(no items)" in text
    assert "TOTAL" in text and "$0.00" in text


def test_text_fits_58mm_paper(store):
    store.add_item(menu_item_by_id(9))
    store.update_customer(address="Apartment 1204, The Very Long Residential Tower, North Quarter")
    text = format_receipt_text(build_receipt(store.snapshot(), printed_at=PRINTED_AT))
    for line in text.splitlines():
        assert len(line) <= RECEIPT_COLUMNS
    assert "Date: 2026-10-17 12:30" in text
    assert "Address: Apartment 1204," in text


def test_row_formatting_right_aligns_amount():
    assert format_receipt_line(ReceiptLine(ROW, "Cola", "$1.99"), columns=20) == "Cola           $1.99"
    assert format_receipt_line(ReceiptLine(SEPARATOR), columns=5) == "-----"


def test_long_item_names_are_truncated():
    line = format_receipt_line(ReceiptLine(ROW, "A" * 40, "$10.00"), columns=20)
    assert len(line) == 20
    assert line.endswith(" $10.00")
    assert "..." in line
