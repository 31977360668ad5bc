from datetime import datetime
from decimal import Decimal

from tabletap.checkout import CheckoutSession
from tabletap.models import OrderStatus, OrderType
from tabletap.orders import OrderBoard
from tabletap.payment import PaymentStatus, StubPaymentGateway
from tests.factories import CheckoutFormFactory


def test_read_queries_have_no_side_effects(checkout, cart, burger):
    cart.add_item(burger, 2)
    before = cart.items

    checkout.subtotal(), checkout.tax(), checkout.delivery_fee(), checkout.total()
    checkout.total_item_count(), checkout.summary(), checkout.items

    assert cart.items == before


def test_end_to_end_delivery_totals(checkout, cart, burger, cheesecake):
    cart.add_item(burger, 2)
    assert checkout.subtotal() == Decimal("25.98")
    cart.add_item(cheesecake, 1)
    assert checkout.subtotal() == Decimal("33.97")

    checkout.set_order_type(OrderType.DELIVERY)

    assert checkout.delivery_fee() == Decimal("5.99")
    assert checkout.tax() == Decimal("2.72")
    assert checkout.total() == Decimal("42.68")


def test_switching_back_to_pickup_drops_fee(checkout, cart, burger):
    cart.add_item(burger, 1)
    checkout.set_order_type(OrderType.DELIVERY)
    checkout.set_order_type(OrderType.PICKUP)
    assert checkout.delivery_fee() == 0


def test_submit_success_clears_cart_and_posts_order(checkout, cart, burger, gateway, board):
    cart.add_item(burger, 2)
    expected_total = checkout.total()

    result = checkout.submit()

    assert result.succeeded
    assert result.amount == expected_total
    assert gateway.charges == [expected_total]
    assert len(cart) == 0
    placed = board.get(result.order_id)
    assert placed is not None
    assert placed.customer_name == "Jane Doe"
    assert placed.item_count == 2
    assert placed.total == expected_total
    assert placed.status is OrderStatus.PENDING


def test_submit_refuses_incomplete_form_without_charging(cart, burger, gateway):
    cart.add_item(burger, 1)
    session = CheckoutSession(cart, gateway, form=CheckoutFormFactory(customer_email=""))

    result = session.submit()

    assert result.status is PaymentStatus.REFUSED
    assert "Email" in result.message
    assert gateway.charges == []
    assert len(cart) == 1


def test_submit_refuses_delivery_without_address(cart, burger, gateway):
    cart.add_item(burger, 1)
    session = CheckoutSession(cart, gateway, form=CheckoutFormFactory(order_type=OrderType.DELIVERY))

    assert not session.can_submit()
    assert session.submit().status is PaymentStatus.REFUSED


def test_submit_refuses_empty_cart(checkout, gateway):
    result = checkout.submit()
    assert result.status is PaymentStatus.REFUSED
    assert gateway.charges == []


def test_payment_failure_leaves_cart_intact(cart, burger, board):
    cart.add_item(burger, 1)
    session = CheckoutSession(cart, StubPaymentGateway(fail_with="card declined"), board, form=CheckoutFormFactory())

    result = session.submit()

    assert result.status is PaymentStatus.FAILED
    assert "card declined" in result.message
    assert len(cart) == 1
    assert len(board) == 0


def test_retry_after_failure_succeeds(cart, burger):
    cart.add_item(burger, 1)
    gateway = StubPaymentGateway(fail_with="timeout")
    session = CheckoutSession(cart, gateway, form=CheckoutFormFactory())

    assert session.submit().status is PaymentStatus.FAILED
    gateway.fail_with = None
    result = session.submit()

    assert result.succeeded
    assert result.order_id is None
    assert len(cart) == 0


def test_placed_order_ids_continue_after_existing(cart, burger, gateway):
    board = OrderBoard()
    session = CheckoutSession(cart, gateway, board, form=CheckoutFormFactory())

    cart.add_item(burger, 1)
    first = session.submit().order_id
    cart.add_item(burger, 1)
    session.form = CheckoutFormFactory(customer_name="Sam Lee")
    second = session.submit().order_id

    assert int(second) == int(first) + 1


def test_cancel_clears_cart(checkout, cart, burger):
    cart.add_item(burger, 1)
    checkout.cancel()
    assert len(cart) == 0


def test_successful_submit_starts_a_blank_form(checkout, cart, burger):
    cart.add_item(burger, 1)
    checkout.set_order_type(OrderType.DELIVERY)
    checkout.form.delivery_address = "1 Elm St"
    before = datetime.now()

    assert checkout.submit().succeeded

    assert checkout.form.customer_name == ""
    assert checkout.form.customer_email == ""
    assert checkout.form.delivery_address == ""
    assert checkout.order_type is OrderType.PICKUP
    assert checkout.form.pickup_time >= before


def test_cancel_discards_the_form(checkout, cart, burger):
    cart.add_item(burger, 1)
    checkout.cancel()
    assert checkout.form.customer_name == ""
    assert not checkout.can_submit()


def test_failed_payment_keeps_the_form(cart, burger):
    cart.add_item(burger, 1)
    session = CheckoutSession(cart, StubPaymentGateway(fail_with="card declined"), form=CheckoutFormFactory())

    session.submit()

    assert session.form.customer_name == "Jane Doe"
