"""Restaurant contact details and opening hours."""

from __future__ import annotations

from datetime import date

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from tabletap.constant import (
    BUSINESS_HOURS,
    RESTAURANT_ADDRESS,
    RESTAURANT_EMAIL,
    RESTAURANT_NAME,
    RESTAURANT_PHONE,
    RESTAURANT_TAGLINE,
)


def info_text(today: date | None = None) -> Text:
    """About text with today's hours highlighted."""
    today = today or date.today()
    text = Text()
    text.append(f"{RESTAURANT_NAME}\n", style="bold")
    text.append(f"{RESTAURANT_TAGLINE}\n\n", style="italic")
    text.append(f"Address  {RESTAURANT_ADDRESS}\n")
    text.append(f"Phone    {RESTAURANT_PHONE}\n")
    text.append(f"Email    {RESTAURANT_EMAIL}\n\n")
    text.append("Hours\n", style="bold")
    for idx, (day_name, hours) in enumerate(BUSINESS_HOURS):
        if idx:
            text.append("\n")
        is_today = idx == today.weekday()
        text.append(f"{'➤' if is_today else ' '} {day_name:<10} {hours}", style="bold #5fbf72" if is_today else "")
    return text


class InfoModal(ModalScreen[None]):
    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
    ]

    CSS = """
    InfoModal {
        align: center middle;
        background: $background 60%;
    }

    #info-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #info-body {
        color: white;
        margin-bottom: 1;
    }

    #info-help {
        color: #dddddd;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="info-dialog"):
            yield Static(info_text(), id="info-body")
            yield Static("Enter/Esc close", id="info-help")

    def action_close(self) -> None:
        self.dismiss(None)
