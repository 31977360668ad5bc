"""Pilot-driven checks of the Textual screens."""

import asyncio
from datetime import datetime
from decimal import Decimal

from tabletap.checkout_modal import CheckoutModal
from tabletap.info_modal import InfoModal
from tabletap.item_modal import ItemDetailModal
from tabletap.models import OrderStatus, ReservationStatus, Role, Session
from tabletap.orders_modal import OrdersModal
from tabletap.payment import StubPaymentGateway
from tabletap.reservation_modal import ReservationModal
from tabletap.restaurant_app import RestaurantApp
from tabletap.tables_modal import TableManagementModal


def _app(**kwargs) -> RestaurantApp:
    kwargs.setdefault("payment_delay", 0.05)
    kwargs.setdefault("reservation_delay", 0.05)
    return RestaurantApp(**kwargs)


async def _add_burgers(pilot, quantity: int = 2) -> None:
    await pilot.press("2")
    await pilot.press("enter")
    await pilot.pause()
    for _ in range(quantity - 1):
        await pilot.press("right")
    # Wrap from the quantity row to "Add to Order".
    await pilot.press("up")
    await pilot.press("enter")
    await pilot.pause()
    await pilot.press("ctrl+c")


async def _type(pilot, text: str) -> None:
    await pilot.press(*text)


def test_add_item_from_menu():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("2")
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, ItemDetailModal)
            await pilot.press("right", "up", "enter")
            await pilot.pause()
            assert not isinstance(app.screen, ItemDetailModal)

    asyncio.run(scenario())

    assert app.cart.total_item_count() == 2
    assert app.cart.subtotal() == Decimal("25.98")
    assert app.cart.items[0].menu_item.name == "Classic Burger"


def test_remove_selected_line():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await _add_burgers(pilot, 1)
            await _add_burgers(pilot, 3)
            assert len(app.cart) == 2
            await pilot.press("d")
            await pilot.pause()

    asyncio.run(scenario())

    assert [line.quantity for line in app.cart.items] == [1]


def test_checkout_pickup_pays_and_clears_cart():
    gateway = StubPaymentGateway()
    app = _app(gateway=gateway)

    async def scenario():
        async with app.run_test() as pilot:
            await _add_burgers(pilot, 2)
            await pilot.press("c")
            await pilot.pause()
            assert isinstance(app.screen, CheckoutModal)
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down")
            await _type(pilot, "5550100")
            await pilot.press("down")
            await _type(pilot, "jane")
            # pickup time, then pay
            await pilot.press("down", "down", "enter")
            await pilot.pause(0.3)
            assert not isinstance(app.screen, CheckoutModal)

    asyncio.run(scenario())

    assert len(app.cart) == 0
    # 25.98 + 2.08 tax
    assert gateway.charges == [Decimal("28.06")]
    assert app.board.orders[-1].customer_name == "jane"
    assert app.board.orders[-1].status is OrderStatus.PENDING


def test_checkout_refuses_incomplete_form():
    gateway = StubPaymentGateway()
    app = _app(gateway=gateway)

    async def scenario():
        async with app.run_test() as pilot:
            await _add_burgers(pilot, 1)
            await pilot.press("c")
            await pilot.pause()
            await pilot.press("up", "enter")
            await pilot.pause(0.2)
            assert isinstance(app.screen, CheckoutModal)
            assert "Missing" in app.screen.status

    asyncio.run(scenario())

    assert gateway.charges == []
    assert len(app.cart) == 1


def test_dismissing_checkout_while_paying_keeps_cart():
    gateway = StubPaymentGateway()
    app = _app(gateway=gateway, payment_delay=0.2)

    async def scenario():
        async with app.run_test() as pilot:
            await _add_burgers(pilot, 1)
            await pilot.press("c")
            await pilot.pause()
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down")
            await _type(pilot, "555")
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down", "down", "enter")
            await pilot.press("escape")
            await pilot.pause(0.5)
            assert not isinstance(app.screen, CheckoutModal)

    asyncio.run(scenario())

    assert gateway.charges == []
    assert len(app.cart) == 1


def test_reservation_confirmed_after_delay():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("r")
            await pilot.pause()
            assert isinstance(app.screen, ReservationModal)
            await _type(pilot, "jane")
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down")
            await _type(pilot, "5550100")
            await pilot.press("up", "up", "up", "enter")
            await pilot.pause(0.3)
            assert not isinstance(app.screen, ReservationModal)

    asyncio.run(scenario())

    assert app.last_reservation is not None
    assert app.last_reservation.name == "jane"
    assert app.last_reservation.party_size == 2
    assert app.book.get(app.last_reservation.id) == app.last_reservation
    assert app.last_reservation.table_number is not None


def test_reservation_without_email_stays_open():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("r")
            await pilot.pause()
            await _type(pilot, "jane")
            await pilot.press("up", "enter")
            await pilot.pause(0.2)
            assert isinstance(app.screen, ReservationModal)
            assert app.screen.status == "Missing: Email, Phone"

    asyncio.run(scenario())

    assert app.last_reservation is None


def test_order_board_is_owner_only():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("o")
            await pilot.pause()
            assert not isinstance(app.screen, OrdersModal)
            assert "owners only" in app.system_status

    asyncio.run(scenario())


def test_owner_accepts_first_order():
    app = _app(session=Session(display_name="Owner", role=Role.OWNER))

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("o")
            await pilot.pause()
            assert isinstance(app.screen, OrdersModal)
            await pilot.press("enter")
            await pilot.pause()

    asyncio.run(scenario())

    assert app.board.get("1234").status is OrderStatus.IN_PROGRESS


def test_next_checkout_starts_with_blank_form():
    app = _app()
    seen = {}

    async def scenario():
        async with app.run_test() as pilot:
            await _add_burgers(pilot, 1)
            await pilot.press("c")
            await pilot.pause()
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down")
            await _type(pilot, "555")
            await pilot.press("down")
            await _type(pilot, "jane")
            await pilot.press("down", "down", "enter")
            await pilot.pause(0.3)

            await _add_burgers(pilot, 1)
            seen["opened_at"] = datetime.now()
            await pilot.press("c")
            await pilot.pause()
            assert isinstance(app.screen, CheckoutModal)
            seen["form"] = app.screen.session.form

    asyncio.run(scenario())

    form = seen["form"]
    assert form.customer_name == ""
    assert form.customer_phone == ""
    assert form.customer_email == ""
    assert form.pickup_time >= seen["opened_at"]


def test_info_screen_opens_and_closes():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("i")
            await pilot.pause()
            assert isinstance(app.screen, InfoModal)
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, InfoModal)

    asyncio.run(scenario())


def test_table_management_is_owner_only():
    app = _app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("t")
            await pilot.pause()
            assert not isinstance(app.screen, TableManagementModal)
            assert "owners only" in app.system_status

    asyncio.run(scenario())


def test_owner_cancels_first_booking_of_the_day():
    app = _app(session=Session(display_name="Owner", role=Role.OWNER))

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("t")
            await pilot.pause()
            assert isinstance(app.screen, TableManagementModal)
            await pilot.press("x")
            await pilot.pause()

    asyncio.run(scenario())

    # The 17:30 Smith booking is the first one today.
    assert app.book.get("sample-1").status is ReservationStatus.CANCELLED
