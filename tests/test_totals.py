"""Tests for totals calculation and money formatting."""
from decimal import Decimal

from foodex.data import menu_item_by_id
from foodex.models import OrderLineItem
from foodex.totals import calculate_totals, format_money, to_decimal


def test_empty_order_is_zero():
    totals = calculate_totals([], 0, 0)
    assert totals.subtotal == Decimal("0")
    assert totals.total == Decimal("0")


def test_float_prices_sum_exactly():
    totals = calculate_totals([{"price": 5.99}, {"price": 2.99}], 0, 0)
    assert totals.subtotal == Decimal("8.98")
    assert totals.total == Decimal("8.98")


def test_discount_and_delivery():
    totals = calculate_totals([{"price": 10.00}], discount=2.00, delivery_charge=1.50)
    assert totals.subtotal == Decimal("10.00")
    assert totals.total == Decimal("9.50")


def test_negative_discount_is_a_surcharge():
    totals = calculate_totals([{"price": "4.00"}], discount="-1.00", delivery_charge=0)
    assert totals.total == Decimal("5.00")


def test_empty_order_with_adjustments_only():
    totals = calculate_totals([], discount="1.00", delivery_charge="3.00")
    assert totals.subtotal == Decimal("0")
    assert totals.total == Decimal("2.00")


def test_missing_and_malformed_inputs_default_to_zero():
    totals = calculate_totals(None, None, None)
    assert totals.total == Decimal("0")

    totals = calculate_totals([{}, {"price": "abc"}, {"price": None}, {"price": "3"}], "nan", "oops")
    assert totals.subtotal == Decimal("3")
    assert totals.total == Decimal("3")


def test_line_items_are_read_by_attribute():
    burger = OrderLineItem.from_menu_item(menu_item_by_id(1))
    fries = OrderLineItem.from_menu_item(menu_item_by_id(6))
    totals = calculate_totals([burger, fries, burger])
    assert totals.subtotal == burger.price * 2 + fries.price


def test_calculation_is_pure():
    items = [{"price": "1.10"}, {"price": "2.20"}]
    assert calculate_totals(items, "0.30", "1") == calculate_totals(items, "0.30", "1")
    assert items == [{"price": "1.10"}, {"price": "2.20"}]


def test_to_decimal_handles_floats_and_infinities():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(float("inf")) == Decimal("0")
    assert to_decimal(True) == Decimal("0")


def test_format_money_rounds_half_up():
    assert format_money(Decimal("8.98")) == "$8.98"
    assert format_money(Decimal("2.005")) == "$2.01"
    assert format_money(0) == "$0.00"
    assert format_money(Decimal("-2")) == "-$2.00"


def test_non_iterable_items_are_treated_as_empty():
    assert calculate_totals(5, 0, 0).total == Decimal("0")
    assert calculate_totals("5.99", 0, 0).subtotal == Decimal("0")


def test_single_mapping_instead_of_list_is_malformed():
    totals = calculate_totals({"price": "3"}, 1, 0)
    assert totals.subtotal == Decimal("0")
    assert totals.total == Decimal("-1")


def test_format_money_handles_large_amounts():
    assert format_money(Decimal("1e30")) == "$1" + "0" * 30 + ".00"
    assert format_money(Decimal("-1e30")) == "-$1" + "0" * 30 + ".00"
