from decimal import Decimal

import pytest

from tabletap.cart import Cart
from tabletap.checkout import CheckoutSession
from tabletap.orders import OrderBoard
from tabletap.payment import StubPaymentGateway
from tests.factories import CheckoutFormFactory, MenuItemFactory


@pytest.fixture
def cart() -> Cart:
    """An empty cart for the current session."""
    return Cart()


@pytest.fixture
def burger():
    return MenuItemFactory(id="classic_burger", name="Classic Burger", price=Decimal("12.99"))


@pytest.fixture
def cheesecake():
    return MenuItemFactory(id="cheesecake", name="Cheesecake", price=Decimal("7.99"))


@pytest.fixture
def gateway() -> StubPaymentGateway:
    return StubPaymentGateway()


@pytest.fixture
def board() -> OrderBoard:
    return OrderBoard()


@pytest.fixture
def checkout(cart: Cart, gateway: StubPaymentGateway, board: OrderBoard) -> CheckoutSession:
    """Checkout over the ``cart`` fixture with a complete pickup form."""
    return CheckoutSession(cart, gateway, board, form=CheckoutFormFactory())
