"""Money helpers and checkout price derivation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from tabletap.config import DELIVERY_FEE, TAX_RATE
from tabletap.models import OrderItem, OrderType

if TYPE_CHECKING:
    from tabletap.cart import Cart

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | str) -> Decimal:
    """Quantize a value to cents using half-up rounding."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"${to_money(value):,.2f}"


def unit_price(item: OrderItem) -> Decimal:
    """Menu price plus every selected customization option."""
    return item.menu_item.price + sum((c.price for c in item.customizations), ZERO)


def line_total(item: OrderItem) -> Decimal:
    return to_money(unit_price(item) * item.quantity)


def tax(subtotal: Decimal) -> Decimal:
    return to_money(subtotal * TAX_RATE)


def delivery_fee(order_type: OrderType) -> Decimal:
    if order_type is OrderType.DELIVERY:
        return to_money(DELIVERY_FEE)
    return ZERO


@dataclass(frozen=True)
class PriceSummary:
    """Derived totals shown on the checkout screen."""

    subtotal: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal
    item_count: int


def summarize(cart: Cart, order_type: OrderType) -> PriceSummary:
    subtotal = cart.subtotal()
    tax_amount = tax(subtotal)
    fee = delivery_fee(order_type)
    return PriceSummary(
        subtotal=subtotal,
        tax=tax_amount,
        delivery_fee=fee,
        total=subtotal + tax_amount + fee,
        item_count=cart.total_item_count(),
    )
