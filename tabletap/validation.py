"""Form completeness checks for checkout and reservations.

Only presence is checked. Email and phone formats are deliberately left to
whoever consumes the data.
"""

from __future__ import annotations

from tabletap.config import MAX_PARTY_SIZE, MIN_PARTY_SIZE
from tabletap.models import CheckoutForm, OrderType, ReservationRequest


def _filled(value: str) -> bool:
    return bool(value and value.strip())


def missing_checkout_fields(form: CheckoutForm) -> list[str]:
    """Return labels of required checkout fields that are still empty."""
    missing: list[str] = []
    if not _filled(form.customer_name):
        missing.append("Name")
    if not _filled(form.customer_phone):
        missing.append("Phone")
    if not _filled(form.customer_email):
        missing.append("Email")
    if form.order_type is OrderType.DELIVERY and not _filled(form.delivery_address):
        missing.append("Delivery address")
    return missing


def is_checkout_valid(form: CheckoutForm) -> bool:
    return not missing_checkout_fields(form)


def missing_reservation_fields(request: ReservationRequest) -> list[str]:
    missing: list[str] = []
    if not _filled(request.name):
        missing.append("Name")
    if not _filled(request.email):
        missing.append("Email")
    if not _filled(request.phone_number):
        missing.append("Phone")
    return missing


def is_reservation_valid(request: ReservationRequest) -> bool:
    return not missing_reservation_fields(request)


def clamp_party_size(party_size: int) -> int:
    return max(MIN_PARTY_SIZE, min(MAX_PARTY_SIZE, int(party_size)))
