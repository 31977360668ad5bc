"""Owner order board modal."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from tabletap.models import OrderStatus, OrderType, PlacedOrder
from tabletap.orders import OrderBoard
from tabletap.pricing import format_money
from tabletap.rendering import format_board_row, window_bounds

_TYPE_FILTERS: list[OrderType | None] = [None, OrderType.DELIVERY, OrderType.PICKUP]


class OrdersModal(ModalScreen[None]):
    """Search, filter and advance orders on the owner board."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "advance_current", "Accept / Complete"),
        ("ctrl+t", "cycle_type_filter", "Order type"),
    ]

    CSS = """
    OrdersModal {
        align: center middle;
        background: $background 60%;
    }

    #orders-dialog {
        width: 96;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #orders-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #orders-stats, #orders-filter {
        color: #dddddd;
        margin-bottom: 1;
    }

    #orders-body {
        color: white;
        margin-bottom: 1;
    }

    #orders-help {
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, board: OrderBoard) -> None:
        super().__init__()
        self.board = board
        self.search_text = ""
        self.type_filter_index = 0

    def compose(self) -> ComposeResult:
        with Container(id="orders-dialog"):
            yield Static("Orders", id="orders-title")
            yield Static(id="orders-stats")
            yield Static(id="orders-filter")
            yield Static(id="orders-body")
            yield Static("Type to search, ↑/↓ move, Enter accept/complete, Ctrl+T type, Esc close", id="orders-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            self.search_text = self.search_text[:-1]
            self.cursor_index = 0
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.search_text += event.character
            self.cursor_index = 0
            self._refresh_content()
            event.stop()

    @property
    def type_filter(self) -> OrderType | None:
        return _TYPE_FILTERS[self.type_filter_index]

    def visible_orders(self) -> list[PlacedOrder]:
        return self.board.filter(self.search_text, self.type_filter)

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self.visible_orders()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_advance_current(self) -> None:
        rows = self.visible_orders()
        if not rows:
            return
        self.board.advance(rows[self.cursor_index].id)
        self._refresh_content()

    def action_cycle_type_filter(self) -> None:
        self.type_filter_index = (self.type_filter_index + 1) % len(_TYPE_FILTERS)
        self.cursor_index = 0
        self._refresh_content()

    def _refresh_content(self) -> None:
        stats = self.board.stats()
        self.query_one("#orders-stats", Static).update(
            Text(
                f"{OrderStatus.PENDING.value}: {stats.pending}   "
                f"{OrderStatus.IN_PROGRESS.value}: {stats.in_progress}   "
                f"{OrderStatus.COMPLETED.value}: {stats.completed}   "
                f"Revenue: {format_money(stats.revenue)}"
            )
        )
        type_label = self.type_filter.label if self.type_filter is not None else "All"
        self.query_one("#orders-filter", Static).update(Text(f"Search: {self.search_text}|   Type: {type_label}"))

        body = self.query_one("#orders-body", Static)
        rows = self.visible_orders()
        if not rows:
            body.update("No matching orders")
            return
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1

        start, end = window_bounds(len(rows), 12, self.cursor_index)
        content = Text()
        if start > 0:
            content.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                content.append("\n")
            content.append("➤ " if idx == self.cursor_index else "  ")
            content.append_text(format_board_row(rows[idx]))
        if end < len(rows):
            content.append("\n⋮", style="dim")
        body.update(content)
