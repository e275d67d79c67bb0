"""Tests for thermal receipt rendering and printing."""
from datetime import datetime

import pytest
from escpos.printer import Dummy
from PIL import ImageFont

from foodex import printer as printer_module
from foodex.config import PRINTER_WIDTH_PX
from foodex.data import menu_item_by_id
from foodex.receipt import CENTER, ROW, TEXT, TITLE, TOTAL, ReceiptLine, build_receipt
from foodex.store import OrderStore


@pytest.fixture
def fonts():
    return {"body": ImageFont.load_default()}


@pytest.fixture(autouse=True)
def no_separator_pause(monkeypatch):
    monkeypatch.setattr(printer_module, "sleep", lambda _seconds: None)


@pytest.mark.parametrize("style", [TITLE, CENTER, TEXT, ROW, TOTAL])
def test_lines_render_at_paper_width(fonts, style):
    img = printer_module.render_receipt_line(ReceiptLine(style, "Cheeseburger", "$6.49"), fonts)
    assert img.mode == "1"
    assert img.width == PRINTER_WIDTH_PX
    assert img.height >= 12


def test_fit_text_adds_ellipsis(fonts):
    fitted = printer_module._fit_text_to_px("X" * 200, fonts["body"], 100)
    assert fitted.endswith("...")
    assert len(fitted) < 200


def test_print_receipt_sends_images_and_cuts(fonts):
    store = OrderStore()
    store.add_item(menu_item_by_id(2))
    store.update_customer(name="Ana", phone="555", address="4 Elm St")
    lines = build_receipt(store.snapshot(), printed_at=datetime(2026, 1, 2, 3, 4))

    dummy = Dummy()
    printer_module.print_receipt(lines, printer=dummy, fonts=fonts)

    output = dummy.output
    assert len(output) > 0
    assert b"\x1dV" in output


def test_print_receipt_with_no_lines_does_nothing(fonts):
    dummy = Dummy()
    printer_module.print_receipt([], printer=dummy, fonts=fonts)
    assert dummy.output == b""


def test_font_override_from_environment(tmp_path, monkeypatch):
    font_file = tmp_path / "receipt.ttf"
    font_file.write_bytes(b"")
    monkeypatch.setenv("FOODEX_PRINTER_FONT_PATH", str(font_file))
    assert printer_module.resolve_printer_font_path() == str(font_file)


def test_dependency_check_reports_status():
    ok, message = printer_module.check_printer_dependencies()
    assert isinstance(ok, bool)
    assert message in {"Printer ready"} or message.startswith("Printer deps unavailable")
