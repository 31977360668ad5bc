"""Rich text helpers shared by the screens."""

from __future__ import annotations

from rich.text import Text

from tabletap.models import Customization, OrderItem, OrderStatus, OrderType, PlacedOrder, Reservation, ReservationStatus
from tabletap.pricing import PriceSummary, format_money, line_total


def badge_style(order_type: OrderType) -> str:
    """Return a consistent badge style for order type tags."""
    if order_type is OrderType.DELIVERY:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def status_style(status: OrderStatus) -> str:
    if status is OrderStatus.PENDING:
        return "bold #1a1a1a on #f0a030"
    if status is OrderStatus.IN_PROGRESS:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_customizations(customizations: list[Customization]) -> Text:
    """Render selected options as compact tags."""
    text = Text()
    selected = [c for c in customizations if c.selected_option is not None]
    for idx, customization in enumerate(selected):
        if idx > 0:
            text.append(" ")
        option = customization.selected_option
        label = f"[{option.name}"
        if option.price:
            label += f" +{format_money(option.price)}"
        text.append(label + "]", style="white")
    return text


def format_order_line(item: OrderItem) -> Text:
    text = Text()
    text.append(f"{item.quantity}x ", style="bold")
    text.append(item.menu_item.name)
    text.append(f"  {format_money(line_total(item))}", style="dim")
    tags = format_customizations(item.customizations)
    if tags.plain:
        text.append("\n      ")
        text.append_text(tags)
    if item.special_instructions:
        text.append(f"\n      “{item.special_instructions}”", style="italic")
    return text


def format_totals(summary: PriceSummary, order_type: OrderType) -> Text:
    text = Text()
    text.append(f"Subtotal  {format_money(summary.subtotal)}\n")
    text.append(f"Tax       {format_money(summary.tax)}\n")
    if order_type is OrderType.DELIVERY:
        text.append(f"Delivery  {format_money(summary.delivery_fee)}\n")
    text.append(f"Total     {format_money(summary.total)}", style="bold")
    return text


def format_board_row(order: PlacedOrder) -> Text:
    text = Text()
    text.append(f"#{order.id} ")
    text.append(f" {order.order_type.label} ", style=badge_style(order.order_type))
    text.append(f" {order.customer_name}  {order.item_count} items  {format_money(order.total)}  {order.placed_at} ")
    text.append(f" {order.status.value} ", style=status_style(order.status))
    return text


def reservation_style(status: ReservationStatus) -> str:
    if status is ReservationStatus.PENDING:
        return "bold #1a1a1a on #f0a030"
    if status is ReservationStatus.CONFIRMED:
        return "bold #ffffff on #2f6db5"
    if status is ReservationStatus.CANCELLED:
        return "bold #ffffff on #b23a48"
    return "bold #0b1f0f on #5fbf72"


def format_reservation_row(reservation: Reservation) -> Text:
    text = Text()
    text.append(reservation.starts_at.strftime("%I:%M %p"), style="bold")
    text.append(f"  {reservation.name}  {reservation.party_size} people")
    table = f"Table {reservation.table_number}" if reservation.table_number else "No table"
    text.append(f"  {table} ", style="dim")
    text.append(f" {reservation.status.value} ", style=reservation_style(reservation.status))
    if reservation.special_requests:
        text.append(f"\n      Special request: {reservation.special_requests}", style="italic #f0a030")
    return text


def format_table_cell(number: int, reservation: Reservation | None) -> Text:
    if reservation is None:
        return Text(f"T{number:<2} Available", style="#5fbf72")
    return Text(f"T{number:<2} Reserved ", style="#f0a030")


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Visible slice that keeps the selected row near the middle."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        start = max(0, selected - rows // 2)
        start = min(start, total - rows)

    return (start, start + rows)
