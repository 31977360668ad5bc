"""Main Textual app class."""

from __future__ import annotations

import logging
from datetime import date

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from tabletap.cart import Cart
from tabletap.checkout import CheckoutSession
from tabletap.checkout_modal import CheckoutModal
from tabletap.config import PAYMENT_DELAY_SECONDS, RESERVATION_DELAY_SECONDS
from tabletap.constant import RESTAURANT_NAME, RESTAURANT_TAGLINE
from tabletap.data import MENU_CATEGORIES, hours_for, sample_orders, sample_reservations, search_menu
from tabletap.info_modal import InfoModal
from tabletap.item_modal import ItemDetailModal
from tabletap.models import Customization, MenuCategory, MenuItem, OrderItem, OrderType, Reservation, Session
from tabletap.orders import OrderBoard
from tabletap.orders_modal import OrdersModal
from tabletap.payment import PaymentGateway, PaymentResult, StubPaymentGateway
from tabletap.pricing import format_money, summarize
from tabletap.rendering import format_order_line, format_totals, window_bounds
from tabletap.reservation_modal import ReservationModal
from tabletap.reservations import ReservationBook
from tabletap.tables_modal import TableManagementModal

logger = logging.getLogger(__name__)


class RestaurantApp(App):
    """A Textual app for browsing the menu, ordering and booking a table."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = RESTAURANT_TAGLINE

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #cart-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #menu-pane {
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

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-totals {
        height: auto;
        padding: 1 1 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    category_index = reactive(None)
    search_query = reactive("")
    selected_index = reactive(0)
    cart_selected_index = reactive(None)

    BINDINGS = [
        ("up", "cycle_results(-1)", "Previous item"),
        ("down", "cycle_results(1)", "Next item"),
        ("enter", "open_selected", "Open item"),
        ("backspace", "backspace_search", "Delete search char"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+c", "cancel_active_mode", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: Session | None = None,
        categories: list[MenuCategory] | None = None,
        gateway: PaymentGateway | None = None,
        board: OrderBoard | None = None,
        book: ReservationBook | None = None,
        payment_delay: float = PAYMENT_DELAY_SECONDS,
        reservation_delay: float = RESERVATION_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self.session = session or Session()
        self.categories = categories if categories is not None else MENU_CATEGORIES
        self.cart = Cart()
        self.gateway = gateway or StubPaymentGateway()
        self.board = board if board is not None else OrderBoard(sample_orders())
        self.book = book if book is not None else ReservationBook(sample_reservations())
        self.payment_delay = payment_delay
        self.reservation_delay = reservation_delay
        self.checkout_session = CheckoutSession(self.cart, self.gateway, self.board)
        self.system_status = ""
        self.last_reservation: Reservation | None = None
        logger.info("app_init role=%s", self.session.role.value)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("(cart is empty)", id="cart-list")
                yield Static(id="cart-totals")
            with Vertical(id="menu-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        self.system_status = f"Welcome, {self.session.display_name}. Open today {hours_for(date.today())}"
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return
        if not (event.character.isalnum() or event.character == " "):
            return

        key = event.character.lower()
        if self.input_state == "normal":
            if key.isdigit():
                idx = int(key) - 1
                if 0 <= idx < len(self.categories):
                    self._enter_search(idx)
                    event.stop()
                return

            if key == "a":
                self._enter_search(None)
            elif key == "j":
                self._move_cart_selection(1)
            elif key == "k":
                self._move_cart_selection(-1)
            elif key == "d":
                self._remove_selected_line()
            elif key == "x":
                self._clear_cart()
            elif key == "c":
                self.action_checkout()
            elif key == "r":
                self.action_reserve()
            elif key == "o":
                self.action_owner_orders()
            elif key == "t":
                self.action_owner_tables()
            elif key == "i":
                self.action_info()
            else:
                return
            event.stop()
            return

        self.search_query += event.character
        self.selected_index = 0
        self._refresh_menu()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_menu()

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

    def action_open_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return
        self.push_screen(ItemDetailModal(results[self.selected_index], on_add=self._add_to_cart))

    def action_backspace_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active" or not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_menu()

    def action_checkout(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not self.cart:
            self._set_status("Nothing to check out")
            return
        # Each opening of the checkout screen is a new attempt.
        self.checkout_session.reset_form()
        self.push_screen(CheckoutModal(self.checkout_session, self.payment_delay), self._on_checkout_closed)

    def action_reserve(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(ReservationModal(self.reservation_delay), self._on_reservation_closed)

    def action_owner_orders(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not self.session.is_owner:
            self._set_status("Order board is for owners only")
            return
        self.push_screen(OrdersModal(self.board))

    def action_owner_tables(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not self.session.is_owner:
            self._set_status("Table management is for owners only")
            return
        self.push_screen(TableManagementModal(self.book))

    def action_info(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(InfoModal())

    def _add_to_cart(
        self,
        item: MenuItem,
        quantity: int,
        customizations: list[Customization],
        special_instructions: str,
    ) -> None:
        line = self.cart.add_item(item, quantity, customizations, special_instructions)
        self.cart_selected_index = len(self.cart) - 1
        self._set_status(f"Added {line.quantity}x {item.name}")
        self._refresh_cart()

    def _on_checkout_closed(self, result: PaymentResult | None) -> None:
        if result is None:
            self._refresh_all()
            return
        self.cart_selected_index = None
        order_label = f" #{result.order_id}" if result.order_id else ""
        self._set_status(f"Order{order_label} placed. Paid {format_money(result.amount)}")
        self._refresh_cart()

    def _on_reservation_closed(self, reservation: Reservation | None) -> None:
        if reservation is None:
            return
        reservation = self.book.add(reservation)
        self.last_reservation = reservation
        when = reservation.starts_at.strftime("%a %b %d at %I:%M %p")
        self._set_status(f"Reservation confirmed for {reservation.party_size} on {when}")

    def _enter_search(self, category_index: int | None) -> None:
        self.category_index = category_index
        self.input_state = "active"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_menu()

    def _filtered_results(self) -> list[MenuItem]:
        if self.category_index is None:
            return search_menu(self.search_query, self.categories)
        return search_menu(self.search_query, [self.categories[self.category_index]])

    def _selected_line(self) -> OrderItem | None:
        items = self.cart.items
        if self.cart_selected_index is None or not (0 <= self.cart_selected_index < len(items)):
            return None
        return items[self.cart_selected_index]

    def _move_cart_selection(self, delta: int) -> None:
        if not self.cart:
            return

        if self.cart_selected_index is None:
            self.cart_selected_index = 0 if delta > 0 else len(self.cart) - 1
        else:
            self.cart_selected_index = (self.cart_selected_index + delta) % len(self.cart)
        self._refresh_cart()

    def _remove_selected_line(self) -> None:
        line = self._selected_line()
        if line is None:
            return

        idx = self.cart_selected_index
        self.cart.remove_item(line.id)
        if not self.cart:
            self.cart_selected_index = None
        else:
            self.cart_selected_index = min(idx, len(self.cart) - 1)
        self._set_status(f"Removed {line.menu_item.name}")
        self._refresh_cart()

    def _clear_cart(self) -> None:
        if not self.cart:
            return
        self.checkout_session.cancel()
        self.cart_selected_index = None
        self._set_status("Order cancelled")
        self._refresh_cart()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        logger.info("status %s", message)
        self._refresh_search_bar()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _refresh_all(self) -> None:
        self._refresh_cart()
        self._refresh_menu()

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            totals_widget = self.query_one("#cart-totals", Static)
        except NoMatches:
            return

        items = self.cart.items
        if not items:
            self.cart_selected_index = None
            cart_widget.update("(cart is empty)")
            totals_widget.update("")
            return

        if self.cart_selected_index is not None and self.cart_selected_index >= len(items):
            self.cart_selected_index = len(items) - 1

        start, end = window_bounds(len(items), self._visible_rows(cart_widget) // 2, self.cart_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.cart_selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_order_line(items[idx]))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        cart_widget.update(lines)

        summary = summarize(self.cart, OrderType.PICKUP)
        totals = Text(f"{summary.item_count} items\n", style="dim")
        totals.append_text(format_totals(summary, OrderType.PICKUP))
        totals_widget.update(totals)

    def _refresh_menu(self) -> None:
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
            shortcuts = "  ".join(f"{idx + 1} {category.name}" for idx, category in enumerate(self.categories))
            status = self.system_status or "Ready"
            hints = "A all. C checkout, R reserve, I info, J/K/D edit cart."
            if self.session.is_owner:
                hints += " O orders, T tables."
            bar.update(Text(f"{shortcuts}  {hints}\n{status}"))
            return

        scope = "All" if self.category_index is None else self.categories[self.category_index].name
        text = Text()
        text.append(f" {scope} ", style="bold #ffffff on #b23a48")
        text.append(f": {self.search_query}")
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

        start, end = window_bounds(len(results), self._visible_rows(results_widget), self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}{results[idx].name}")
            lines.append(f"  {format_money(results[idx].price)}", style="dim")
        if end < len(results):
            lines.append("\n⋮", style="dim")
        results_widget.update(lines)
