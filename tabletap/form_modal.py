"""Keyboard-driven form modal shared by the item, checkout and reservation screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

ResultType = TypeVar("ResultType")

TEXT = "text"
STEPPER = "stepper"
ACTION = "action"


@dataclass(frozen=True)
class FormRow:
    key: str
    label: str
    kind: str = TEXT


class FormModal(ModalScreen[ResultType]):
    """Centered modal listing rows that are typed into, stepped or activated.

    Text rows take printable keys directly. Stepper rows move with left/right
    and action rows run on enter. While ``busy`` only escape is honored.
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("left", "step(-1)", "Decrease"),
        ("right", "step(1)", "Increase"),
        ("enter", "activate", "Select"),
    ]

    CSS = """
    FormModal {
        align: center middle;
        background: $background 60%;
    }

    .form-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    .form-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    .form-body {
        margin-bottom: 1;
        color: white;
    }

    .form-status {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    .form-help {
        color: #dddddd;
    }
    """

    TITLE_TEXT = ""
    HELP_TEXT = "↑/↓ move, ←/→ adjust, type to edit, Enter select, Esc close"

    cursor_index = reactive(0)

    def __init__(self) -> None:
        super().__init__()
        self.status = ""
        self.busy = False

    def compose(self) -> ComposeResult:
        with Container(classes="form-dialog"):
            yield Static(self.TITLE_TEXT, classes="form-title", id="form-title")
            yield Static(id="form-body", classes="form-body")
            yield Static(id="form-status", classes="form-status")
            yield Static(self.HELP_TEXT, classes="form-help", id="form-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if self.busy:
            if event.key != "escape":
                event.stop()
            return

        row = self._current_row()
        if row is None or row.kind != TEXT:
            return

        if event.key == "backspace":
            value = self.get_text(row.key)
            if value:
                self.set_text(row.key, value[:-1])
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.set_text(row.key, self.get_text(row.key) + event.character)
            self.status = ""
            self._refresh_content()
            event.stop()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if self.busy:
            return
        rows = self.rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_step(self, delta: int) -> None:
        row = self._current_row()
        if self.busy or row is None or row.kind != STEPPER:
            return
        self.step(row.key, delta)
        self._refresh_content()

    def action_activate(self) -> None:
        row = self._current_row()
        if self.busy or row is None:
            return
        if row.kind == STEPPER:
            self.step(row.key, 1)
        elif row.kind == ACTION:
            self.activate(row.key)
        else:
            self.cursor_index = (self.cursor_index + 1) % len(self.rows())
        self._refresh_content()

    # Subclass hooks.

    def rows(self) -> list[FormRow]:
        raise NotImplementedError

    def get_text(self, key: str) -> str:
        raise NotImplementedError

    def set_text(self, key: str, value: str) -> None:
        raise NotImplementedError

    def display_value(self, key: str) -> str:
        return self.get_text(key)

    def step(self, key: str, delta: int) -> None:
        return None

    def activate(self, key: str) -> None:
        return None

    def summary(self) -> Text | None:
        return None

    def _current_row(self) -> FormRow | None:
        rows = self.rows()
        if not rows:
            return None
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1
        return rows[self.cursor_index]

    def _refresh_content(self) -> None:
        if not self.is_mounted:
            return
        body = self.query_one("#form-body", Static)
        status = self.query_one("#form-status", Static)

        rows = self.rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = max(0, len(rows) - 1)

        content = Text(style="white")
        for idx, row in enumerate(rows):
            if idx > 0:
                content.append("\n")
            active = idx == self.cursor_index
            pointer = "➤ " if active else "  "
            if row.kind == ACTION:
                content.append(f"{pointer}{row.label}", style="bold reverse" if active else "bold")
                continue
            value = self.display_value(row.key)
            if row.kind == TEXT and active and not self.busy:
                value += "|"
            elif row.kind == STEPPER:
                value = f"◀ {value} ▶"
            content.append(f"{pointer}{row.label}: ", style="bold white" if active else "white")
            content.append(value)

        extra = self.summary()
        if extra is not None:
            content.append("\n\n")
            content.append_text(extra)

        body.update(content)
        status.update(Text(self.status))
