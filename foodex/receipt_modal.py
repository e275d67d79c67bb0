"""Receipt preview modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from foodex.config import RECEIPT_COLUMNS
from foodex.receipt import ReceiptLine, format_receipt_text


class ReceiptPreviewModal(ModalScreen[bool]):
    """Show the receipt as it will print on 58mm paper. Dismisses True to print."""

    CSS = """
    ReceiptPreviewModal {
        align: center middle;
        background: $background 60%;
    }

    #receipt-dialog {
        width: auto;
        height: auto;
        max-height: 100%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
        overflow-y: auto;
    }

    #receipt-paper {
        background: white;
        color: black;
        padding: 0 1;
    }

    #receipt-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, lines: list[ReceiptLine]) -> None:
        super().__init__()
        self.lines = lines

    def compose(self) -> ComposeResult:
        with Container(id="receipt-dialog"):
            yield Static(id="receipt-paper")
            yield Static("p print, Esc/q close", id="receipt-help")

    def on_mount(self) -> None:
        paper = self.query_one("#receipt-paper", Static)
        paper.styles.width = RECEIPT_COLUMNS + 2
        paper.update(Text(format_receipt_text(self.lines)))

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        if event.key == "p":
            self.dismiss(True)
            event.stop()
            return

        # The preview is read-only; swallow everything else.
        event.stop()
