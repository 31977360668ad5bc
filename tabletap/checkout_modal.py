"""Checkout modal: customer details, order type, totals and simulated payment."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from rich.text import Text
from textual.timer import Timer

from tabletap.checkout import CheckoutSession
from tabletap.config import PAYMENT_DELAY_SECONDS, PICKUP_TIME_STEP_MINUTES
from tabletap.form_modal import ACTION, STEPPER, TEXT, FormModal, FormRow
from tabletap.models import OrderType
from tabletap.payment import PaymentResult
from tabletap.pricing import format_money
from tabletap.rendering import format_totals

logger = logging.getLogger(__name__)

_TEXT_FIELDS = {
    "name": "customer_name",
    "phone": "customer_phone",
    "email": "customer_email",
    "address": "delivery_address",
    "instructions": "delivery_instructions",
}


class CheckoutModal(FormModal[PaymentResult | None]):
    """Collect checkout details and run the payment stub after a short delay.

    Dismisses with the successful ``PaymentResult``; failures and refusals stay
    on screen so the customer can fix the form and retry.
    """

    TITLE_TEXT = "Checkout"

    def __init__(self, session: CheckoutSession, payment_delay: float = PAYMENT_DELAY_SECONDS) -> None:
        super().__init__()
        self.session = session
        self.payment_delay = payment_delay
        self._payment_timer: Timer | None = None

    def rows(self) -> list[FormRow]:
        rows = [
            FormRow("order_type", "Order type", STEPPER),
            FormRow("name", "Name", TEXT),
            FormRow("phone", "Phone", TEXT),
            FormRow("email", "Email", TEXT),
        ]
        if self.session.order_type is OrderType.DELIVERY:
            rows.append(FormRow("address", "Delivery address", TEXT))
            rows.append(FormRow("instructions", "Delivery instructions (optional)", TEXT))
        else:
            rows.append(FormRow("pickup_time", "Pickup time", STEPPER))
        rows.append(FormRow("pay", f"Pay {format_money(self.session.total())}", ACTION))
        return rows

    def get_text(self, key: str) -> str:
        return getattr(self.session.form, _TEXT_FIELDS[key])

    def set_text(self, key: str, value: str) -> None:
        setattr(self.session.form, _TEXT_FIELDS[key], value)

    def display_value(self, key: str) -> str:
        if key == "order_type":
            return self.session.order_type.label
        if key == "pickup_time":
            return self.session.form.pickup_time.strftime("%a %H:%M")
        return self.get_text(key)

    def step(self, key: str, delta: int) -> None:
        if key == "order_type":
            new_type = OrderType.DELIVERY if self.session.order_type is OrderType.PICKUP else OrderType.PICKUP
            self.session.set_order_type(new_type)
            return
        if key == "pickup_time":
            form = self.session.form
            proposed = form.pickup_time + timedelta(minutes=PICKUP_TIME_STEP_MINUTES * delta)
            # The picker never goes before now.
            form.pickup_time = max(proposed, datetime.now())

    def activate(self, key: str) -> None:
        if key != "pay":
            return
        if not self.session.can_submit():
            missing = self.session.missing_fields()
            self.status = f"Missing: {', '.join(missing)}" if missing else "Your cart is empty"
            return
        self.busy = True
        self.status = "Processing payment..."
        self._payment_timer = self.set_timer(self.payment_delay, self._complete_payment)
        logger.info("checkout_processing delay=%s", self.payment_delay)

    def summary(self) -> Text:
        return format_totals(self.session.summary(), self.session.order_type)

    def action_close(self) -> None:
        self._cancel_pending()
        self.dismiss(None)

    def on_unmount(self) -> None:
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._payment_timer is not None:
            self._payment_timer.stop()
            self._payment_timer = None
            logger.info("checkout_payment_abandoned")

    def _complete_payment(self) -> None:
        if self._payment_timer is None:
            return
        self._payment_timer = None
        self.busy = False
        result = self.session.submit()
        if result.succeeded:
            self.dismiss(result)
            return
        self.status = result.message
        self._refresh_content()
