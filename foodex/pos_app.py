"""Main Textual app class."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from foodex.adjustments_modal import AdjustmentsModal
from foodex.config import SHOP_NAME
from foodex.customer_modal import CustomerModal
from foodex.data import category_for_hotkey, search_menu
from foodex.models import CustomerDetails, MenuItem, OrderLineItem, OrderSnapshot
from foodex.printer import check_printer_dependencies, print_receipt
from foodex.receipt import ReceiptLine, build_receipt
from foodex.receipt_modal import ReceiptPreviewModal
from foodex.rendering import (
    badge_style,
    format_category_badge,
    format_customer,
    format_line_label,
    format_totals,
)
from foodex.store import OrderStore
from foodex.totals import format_money

logger = logging.getLogger(__name__)

PrintFunction = Callable[[list[ReceiptLine]], None]


class FoodexPosApp(App):
    """A Textual app for taking counter orders and printing 58mm receipts."""

    TITLE = SHOP_NAME
    SUB_TITLE = "Billing System"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #orders-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #search-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #orders-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #totals {
        height: auto;
        border: tall $surface;
        padding: 0 1;
    }

    #customer {
        height: auto;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    category = reactive("Burgers")
    search_query = reactive("")
    selected_index = reactive(0)
    order_selected_index = reactive(None)

    BINDINGS = [
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "register_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+s", "submit_and_print", "Print receipt", priority=True),
        ("escape", "cancel_active_mode", "Exit search"),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: OrderStore | None = None, print_function: PrintFunction | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else OrderStore()
        self._print_function = print_function or print_receipt
        self.system_status = ""
        self._unsubscribe: Callable[[], None] | None = None
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="orders-pane"):
                yield Static("Current Order", classes="pane-title")
                yield Static("(no items yet)", id="orders-list")
                yield Static(id="totals")
                yield Static(id="customer")
            with Vertical(id="search-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self._on_order_changed)
        _, msg = check_printer_dependencies()
        self.system_status = msg
        logger.debug(f"on_mount printer_status={msg!r}")
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_order_changed(self, snapshot: OrderSnapshot) -> None:
        self._refresh_orders()

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return
        if not event.character.isalnum():
            return

        logger.debug(f"on_key key={event.key!r} char={event.character!r} state={self.input_state!r}")

        key = event.character.lower()
        if self.input_state == "normal":
            if key == "j":
                self._move_order_selection(1)
            elif key == "k":
                self._move_order_selection(-1)
            elif key == "x":
                self._delete_selected_order()
            elif key == "c":
                self._open_customer_form()
            elif key == "a":
                self._open_adjustments_form()
            elif key == "p":
                self._open_receipt_preview()
            elif key == "n":
                self._new_order()
            else:
                category = category_for_hotkey(key)
                if category is None:
                    return
                self.category = category
                self.input_state = "active"
                self.search_query = ""
                self.selected_index = 0
                self._refresh_search()
            event.stop()
            return

        self.search_query += event.character
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_register_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return

        item = results[self.selected_index]
        self.store.add_item(item)
        self.order_selected_index = len(self.store.snapshot().items) - 1
        self._refresh_orders()

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_submit_and_print(self) -> None:
        logger.debug(f"submit_enter state={self.input_state!r} screen={type(self.screen).__name__}")
        if isinstance(self.screen, ModalScreen):
            logger.debug("submit_blocked reason=modal")
            return
        if self.input_state != "normal":
            # Leave search so the status line is visible.
            self.action_cancel_active_mode()
        self._submit_order()

    def _submit_order(self) -> None:
        snapshot = self.store.snapshot()
        if snapshot.is_empty:
            self._set_status("Nothing to print")
            logger.debug("submit_blocked reason=no_rows")
            return
        if not snapshot.customer.is_complete():
            self._set_status("Customer details required before printing")
            self.push_screen(CustomerModal(snapshot.customer), callback=self._on_customer_before_print)
            return

        self._print_current_order()

    def _on_customer_before_print(self, customer: CustomerDetails | None) -> None:
        if customer is None:
            self._set_status("Print cancelled: customer details missing")
            return
        self.store.replace_customer(customer)
        self._print_current_order()

    def _print_current_order(self) -> None:
        snapshot = self.store.snapshot()
        totals = self.store.totals()
        lines = build_receipt(snapshot, totals)
        try:
            self._print_function(lines)
        except Exception as exc:
            logger.exception("print failed rows=%d", len(snapshot.items))
            self._set_status(f"Print failed, order kept: {exc}")
            return

        self.store.clear()
        self.order_selected_index = None
        self._set_status(f"Printed receipt, total {format_money(totals.total)}")
        logger.debug(f"submit_printed rows={len(snapshot.items)} total={totals.total}")

    def _open_customer_form(self) -> None:
        self.push_screen(CustomerModal(self.store.snapshot().customer), callback=self._on_customer_submitted)

    def _on_customer_submitted(self, customer: CustomerDetails | None) -> None:
        if customer is None:
            return
        self.store.replace_customer(customer)
        self._set_status("Customer details saved")

    def _open_adjustments_form(self) -> None:
        snapshot = self.store.snapshot()
        self.push_screen(
            AdjustmentsModal(snapshot.discount, snapshot.delivery_charge),
            callback=self._on_adjustments_submitted,
        )

    def _on_adjustments_submitted(self, result: tuple[Decimal, Decimal] | None) -> None:
        if result is None:
            return
        discount, delivery_charge = result
        self.store.set_discount(discount)
        self.store.set_delivery_charge(delivery_charge)

    def _open_receipt_preview(self) -> None:
        snapshot = self.store.snapshot()
        if snapshot.is_empty:
            self._set_status("Nothing to preview")
            return
        lines = build_receipt(snapshot, self.store.totals())
        self.push_screen(ReceiptPreviewModal(lines), callback=self._on_preview_closed)

    def _on_preview_closed(self, print_requested: bool | None) -> None:
        if print_requested:
            self._submit_order()

    def _new_order(self) -> None:
        self.store.clear()
        self.order_selected_index = None
        self._set_status("New order started")

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_search()

    def _filtered_results(self) -> list[MenuItem]:
        return search_menu(self.category, self.search_query)

    def _refresh_all(self) -> None:
        self._refresh_orders()
        self._refresh_search()

    def _move_order_selection(self, delta: int) -> None:
        total = len(self.store.snapshot().items)
        if not total:
            return

        if self.order_selected_index is None:
            self.order_selected_index = 0 if delta > 0 else total - 1
        else:
            self.order_selected_index = (self.order_selected_index + delta) % total
        self._refresh_orders()

    def _delete_selected_order(self) -> None:
        total = len(self.store.snapshot().items)
        if not total or self.order_selected_index is None:
            return

        idx = self.order_selected_index
        if not (0 <= idx < total):
            self.order_selected_index = None
            self._refresh_orders()
            return

        remaining = len(self.store.remove_line_at(idx).items)
        if not remaining:
            self.order_selected_index = None
        else:
            self.order_selected_index = min(idx, remaining - 1)

        self._refresh_orders()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_orders(self) -> None:
        try:
            orders_widget = self.query_one("#orders-list", Static)
            totals_widget = self.query_one("#totals", Static)
            customer_widget = self.query_one("#customer", Static)
        except NoMatches:
            return

        snapshot = self.store.snapshot()
        totals_widget.update(format_totals(self.store.totals()))
        customer_widget.update(format_customer(snapshot.customer))

        items = snapshot.items
        if not items:
            self.order_selected_index = None
            orders_widget.update("(no items yet)")
            return

        if self.order_selected_index is not None and self.order_selected_index >= len(items):
            self.order_selected_index = len(items) - 1

        visible_rows = self._visible_rows(orders_widget)
        start, end = self._window_bounds(len(items), visible_rows, self.order_selected_index)
        orders_widget.update(self._order_lines(items, start, end))

    def _order_lines(self, items: tuple[OrderLineItem, ...], start: int, end: int) -> Text:
        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")

            pointer = "➤ " if idx == self.order_selected_index else "  "
            lines.append(pointer)
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_line_label(items[idx]))

        if end < len(items):
            lines.append("\n⋮", style="dim")
        return lines

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            text = Text("B/F/D/E search. J/K move, X delete, C customer, A adjust, P preview, N new. Ctrl+S print.\n")
            text.append(self.system_status or "Ready", style="italic")
            bar.update(text)
            return

        text = Text()
        text.append_text(format_category_badge(self.category))
        text.append(f" {self.category}: {self.search_query}")
        bar.update(text)

    def _refresh_results(self, results: list[MenuItem]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer, style=badge_style(self.category) if idx == self.selected_index else "")
            lines.append_text(format_line_label(results[idx]))

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
