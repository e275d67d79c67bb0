"""Keyboard-driven multi-field form modal shared by the counter dialogs."""

from __future__ import annotations

from typing import Mapping, TypeVar

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from foodex.validation import FIELD_LABELS

ResultType = TypeVar("ResultType")


class FieldFormModal(ModalScreen[ResultType]):
    """
    Collect a few text fields and validate them before dismissing.

    Subclasses set FORM_TITLE and FIELDS and implement validate() and
    build_result(). Escape cancels with None.
    """

    FORM_TITLE = ""
    FIELDS: tuple[str, ...] = ()
    MAX_LENGTH = 60
    HELP = "Tab/↑/↓ switch field. Enter confirm. Backspace delete. Esc cancel."

    CSS = """
    FieldFormModal {
        align: center middle;
        background: $background 60%;
    }

    #form-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #form-body {
        color: white;
        margin-bottom: 1;
    }

    #form-help {
        color: #dddddd;
    }
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        super().__init__()
        initial = initial or {}
        self.values: dict[str, str] = {name: str(initial.get(name, "")) for name in self.FIELDS}
        self.errors: dict[str, str] = {}
        self.cursor_index = 0

    def compose(self) -> ComposeResult:
        with Container(id="form-dialog"):
            yield Static(self.FORM_TITLE, id="form-title")
            yield Static(id="form-body")
            yield Static(self.HELP, id="form-help")

    def on_mount(self) -> None:
        self._refresh_content()

    @property
    def active_field(self) -> str:
        return self.FIELDS[self.cursor_index]

    def accepts_character(self, character: str) -> bool:
        return True

    def validate(self, values: Mapping[str, str]) -> dict[str, str]:
        raise NotImplementedError

    def build_result(self, values: Mapping[str, str]) -> ResultType:
        raise NotImplementedError

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self._move_cursor(1)
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self._move_cursor(-1)
            event.stop()
            return

        if event.key == "backspace":
            field_name = self.active_field
            if self.values[field_name]:
                self.values[field_name] = self.values[field_name][:-1]
                self.errors.pop(field_name, None)
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character and self.accepts_character(event.character):
            field_name = self.active_field
            if len(self.values[field_name]) < self.MAX_LENGTH:
                self.values[field_name] += event.character
            self.errors.pop(field_name, None)
            self._refresh_content()
            event.stop()

    def _move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.FIELDS)
        self._refresh_content()

    def _confirm(self) -> None:
        errors = self.validate(self.values)
        if errors:
            self.errors = errors
            self.cursor_index = next(idx for idx, name in enumerate(self.FIELDS) if name in errors)
            self._refresh_content()
            return
        self.dismiss(self.build_result(self.values))

    def _refresh_content(self) -> None:
        body = self.query_one("#form-body", Static)
        content = Text(style="white")
        for idx, field_name in enumerate(self.FIELDS):
            if idx > 0:
                content.append("\n")
            is_active = idx == self.cursor_index
            pointer = "➤ " if is_active else "  "
            label = FIELD_LABELS.get(field_name, field_name)
            content.append(f"{pointer}{label}: ", style="bold white" if is_active else "white")
            content.append(self.values[field_name])
            if is_active:
                content.append("|", style="bold")
            if field_name in self.errors:
                content.append(f"\n    {self.errors[field_name]}", style="#ffb3b3")
        body.update(content)
