import pytest

from tabletap.models import OrderType
from tabletap.validation import (
    clamp_party_size,
    is_checkout_valid,
    is_reservation_valid,
    missing_checkout_fields,
    missing_reservation_fields,
)
from tests.factories import CheckoutFormFactory, ReservationRequestFactory


def test_complete_pickup_form_is_valid():
    assert is_checkout_valid(CheckoutFormFactory())


@pytest.mark.parametrize("field", ["customer_name", "customer_phone", "customer_email"])
@pytest.mark.parametrize("order_type", list(OrderType))
def test_contact_fields_always_required(field, order_type):
    form = CheckoutFormFactory(order_type=order_type, delivery_address="1 Elm St", **{field: ""})
    assert not is_checkout_valid(form)


def test_whitespace_only_counts_as_empty():
    form = CheckoutFormFactory(customer_name="   ")
    assert missing_checkout_fields(form) == ["Name"]


def test_delivery_requires_address():
    form = CheckoutFormFactory(order_type=OrderType.DELIVERY, delivery_address="")
    assert not is_checkout_valid(form)
    assert missing_checkout_fields(form) == ["Delivery address"]

    form.delivery_address = "1 Elm St"
    assert is_checkout_valid(form)


def test_pickup_ignores_address_and_instructions():
    form = CheckoutFormFactory(order_type=OrderType.PICKUP, delivery_address="", delivery_instructions="")
    assert is_checkout_valid(form)


def test_no_format_checks_on_email_or_phone():
    form = CheckoutFormFactory(customer_email="not-an-email", customer_phone="abc")
    assert is_checkout_valid(form)


def test_missing_fields_lists_everything_in_form_order():
    form = CheckoutFormFactory(
        customer_name="", customer_phone="", customer_email="", order_type=OrderType.DELIVERY
    )
    assert missing_checkout_fields(form) == ["Name", "Phone", "Email", "Delivery address"]


def test_reservation_with_empty_email_is_invalid():
    request = ReservationRequestFactory(name="Jane", email="", phone_number="555-0100")
    assert not is_reservation_valid(request)
    assert missing_reservation_fields(request) == ["Email"]


def test_reservation_requires_name_email_phone():
    assert is_reservation_valid(ReservationRequestFactory())
    assert not is_reservation_valid(ReservationRequestFactory(name=""))
    assert not is_reservation_valid(ReservationRequestFactory(phone_number=""))


def test_reservation_special_requests_optional():
    assert is_reservation_valid(ReservationRequestFactory(special_requests=""))


@pytest.mark.parametrize("requested, expected", [(0, 1), (1, 1), (2, 2), (20, 20), (21, 20), (-5, 1)])
def test_clamp_party_size(requested, expected):
    assert clamp_party_size(requested) == expected
