"""Checkout flow: totals, submit gating and payment."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from tabletap.cart import Cart
from tabletap.models import CheckoutForm, OrderItem, OrderType, PlacedOrder
from tabletap.orders import OrderBoard
from tabletap.payment import PaymentError, PaymentGateway, PaymentResult, PaymentStatus
from tabletap.pricing import PriceSummary, delivery_fee, summarize, tax
from tabletap.validation import is_checkout_valid, missing_checkout_fields

logger = logging.getLogger(__name__)


class CheckoutSession:
    """One checkout attempt over a cart.

    The read queries never mutate anything. ``submit`` is the only operation
    that talks to the payment gateway, and it only clears the cart when the
    charge succeeded.
    """

    def __init__(
        self,
        cart: Cart,
        gateway: PaymentGateway,
        board: OrderBoard | None = None,
        form: CheckoutForm | None = None,
    ) -> None:
        self.cart = cart
        self.gateway = gateway
        self.board = board
        self.form = form or CheckoutForm()

    @property
    def order_type(self) -> OrderType:
        return self.form.order_type

    def set_order_type(self, order_type: OrderType) -> None:
        self.form.order_type = order_type

    @property
    def items(self) -> list[OrderItem]:
        return self.cart.items

    def total_item_count(self) -> int:
        return self.cart.total_item_count()

    def subtotal(self) -> Decimal:
        return self.cart.subtotal()

    def tax(self) -> Decimal:
        return tax(self.subtotal())

    def delivery_fee(self) -> Decimal:
        return delivery_fee(self.order_type)

    def total(self) -> Decimal:
        return self.summary().total

    def summary(self) -> PriceSummary:
        return summarize(self.cart, self.order_type)

    def missing_fields(self) -> list[str]:
        return missing_checkout_fields(self.form)

    def can_submit(self) -> bool:
        return bool(self.cart) and is_checkout_valid(self.form)

    def submit(self) -> PaymentResult:
        summary = self.summary()
        if not self.cart:
            return PaymentResult(PaymentStatus.REFUSED, summary.total, "Cart is empty")
        missing = self.missing_fields()
        if missing:
            return PaymentResult(PaymentStatus.REFUSED, summary.total, f"Missing: {', '.join(missing)}")

        logger.info("payment_requested amount=%s type=%s", summary.total, self.order_type.value)
        try:
            result = self.gateway.request_payment(summary.total)
        except PaymentError as exc:
            logger.warning("payment_failed amount=%s error=%r", summary.total, exc)
            return PaymentResult(PaymentStatus.FAILED, summary.total, f"Payment failed: {exc}")

        if not result.succeeded:
            logger.warning("payment_not_succeeded status=%s", result.status.value)
            return result

        order_id = self._post_to_board(summary)
        self.cart.clear()
        self.reset_form()
        logger.info("payment_succeeded amount=%s order=%s", summary.total, order_id)
        return PaymentResult(
            status=result.status,
            amount=result.amount,
            message=result.message,
            reference=result.reference,
            order_id=order_id,
        )

    def cancel(self) -> None:
        self.cart.clear()
        self.reset_form()

    def reset_form(self) -> None:
        """Replace the form with a blank one for the next attempt."""
        self.form = CheckoutForm()

    def _post_to_board(self, summary: PriceSummary) -> str | None:
        if self.board is None:
            return None
        order = PlacedOrder(
            id=self.board.next_order_id(),
            order_type=self.order_type,
            customer_name=self.form.customer_name.strip(),
            item_count=summary.item_count,
            total=summary.total,
            placed_at=datetime.now().strftime("%H:%M"),
        )
        self.board.add(order)
        return order.id
