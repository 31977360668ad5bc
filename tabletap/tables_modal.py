"""Owner table management modal: bookings by day and table status."""

from __future__ import annotations

from datetime import date, timedelta

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from tabletap.models import Reservation
from tabletap.rendering import format_reservation_row, format_table_cell, window_bounds
from tabletap.reservations import ReservationBook

_TABLES_PER_ROW = 4


class TableManagementModal(ModalScreen[None]):
    """Browse bookings day by day, seat parties and cancel bookings."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("left", "change_day(-1)", "Previous day"),
        ("right", "change_day(1)", "Next day"),
        ("enter", "complete_current", "Seated"),
        ("x", "cancel_current", "Cancel booking"),
    ]

    CSS = """
    TableManagementModal {
        align: center middle;
        background: $background 60%;
    }

    #tables-dialog {
        width: 96;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #tables-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #tables-stats, #tables-grid {
        color: #dddddd;
        margin-bottom: 1;
    }

    #tables-body {
        color: white;
        margin-bottom: 1;
    }

    #tables-help {
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, book: ReservationBook, day: date | None = None) -> None:
        super().__init__()
        self.book = book
        self.day = day or date.today()

    def compose(self) -> ComposeResult:
        with Container(id="tables-dialog"):
            yield Static(id="tables-title")
            yield Static(id="tables-stats")
            yield Static(id="tables-body")
            yield Static(id="tables-grid")
            yield Static("←/→ day, ↑/↓ move, Enter seated, X cancel, Esc close", id="tables-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def visible_reservations(self) -> list[Reservation]:
        return self.book.for_day(self.day)

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self.visible_reservations()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_change_day(self, delta: int) -> None:
        self.day += timedelta(days=delta)
        self.cursor_index = 0
        self._refresh_content()

    def action_complete_current(self) -> None:
        current = self._current()
        if current is not None:
            self.book.complete(current.id)
        self._refresh_content()

    def action_cancel_current(self) -> None:
        current = self._current()
        if current is not None:
            self.book.cancel(current.id)
        self._refresh_content()

    def _current(self) -> Reservation | None:
        rows = self.visible_reservations()
        if not rows:
            return None
        return rows[min(self.cursor_index, len(rows) - 1)]

    def _refresh_content(self) -> None:
        self.query_one("#tables-title", Static).update(
            Text(f"Table Management  {self.day.strftime('%a %b %d, %Y')}", style="bold")
        )
        stats = self.book.stats(self.day)
        self.query_one("#tables-stats", Static).update(
            Text(
                f"Bookings: {stats.on_day}   Next 7 days: {stats.this_week}   "
                f"Tables available: {stats.tables_available}/{self.book.table_count}"
            )
        )

        grid = Text()
        for idx, (number, reservation) in enumerate(self.book.table_status(self.day)):
            if idx:
                grid.append("\n" if idx % _TABLES_PER_ROW == 0 else "   ")
            grid.append_text(format_table_cell(number, reservation))
        self.query_one("#tables-grid", Static).update(grid)

        body = self.query_one("#tables-body", Static)
        rows = self.visible_reservations()
        if not rows:
            body.update("No reservations")
            return
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1

        start, end = window_bounds(len(rows), 8, self.cursor_index)
        content = Text()
        if start > 0:
            content.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                content.append("\n")
            content.append("➤ " if idx == self.cursor_index else "  ")
            content.append_text(format_reservation_row(rows[idx]))
        if end < len(rows):
            content.append("\n⋮", style="dim")
        body.update(content)
