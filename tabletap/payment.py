"""Payment stub standing in for a real gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol
from uuid import uuid4

from tabletap.pricing import format_money

logger = logging.getLogger(__name__)


class PaymentError(RuntimeError):
    """Raised by a gateway when a charge does not go through."""


class PaymentStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUSED = "refused"


@dataclass(frozen=True)
class PaymentResult:
    status: PaymentStatus
    amount: Decimal
    message: str = ""
    reference: str | None = None
    order_id: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is PaymentStatus.SUCCEEDED


class PaymentGateway(Protocol):
    def request_payment(self, amount: Decimal) -> PaymentResult: ...


class StubPaymentGateway:
    """Accepts every charge unless built with ``fail_with``."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.charges: list[Decimal] = []

    def request_payment(self, amount: Decimal) -> PaymentResult:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if self.fail_with:
            raise PaymentError(self.fail_with)
        self.charges.append(amount)
        reference = uuid4().hex
        logger.info("payment_stub_charged amount=%s ref=%s", amount, reference[:8])
        return PaymentResult(
            status=PaymentStatus.SUCCEEDED,
            amount=amount,
            message=f"Charged {format_money(amount)}",
            reference=reference,
        )
