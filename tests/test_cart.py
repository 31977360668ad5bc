import random
from decimal import Decimal
from uuid import uuid4

import pytest

from tabletap.cart import Cart, clamp_quantity
from tests.factories import CustomizationFactory, CustomizationOptionFactory, MenuItemFactory


def test_add_item_appends_lines_in_insertion_order(cart, burger, cheesecake):
    first = cart.add_item(burger, 2)
    second = cart.add_item(cheesecake, 1)

    assert [line.id for line in cart.items] == [first.id, second.id]
    assert first.menu_item is burger
    assert first.quantity == 2


def test_same_menu_item_twice_gives_two_lines(cart, burger):
    a = cart.add_item(burger, 1)
    b = cart.add_item(burger, 1)

    assert a.id != b.id
    assert len(cart) == 2

    cart.remove_item(a.id)
    assert [line.id for line in cart.items] == [b.id]


@pytest.mark.parametrize("requested, expected", [(0, 1), (-3, 1), (1, 1), (10, 10), (11, 10), (99, 10)])
def test_quantity_is_clamped_to_stepper_range(cart, burger, requested, expected):
    assert clamp_quantity(requested) == expected
    assert cart.add_item(burger, requested).quantity == expected


def test_remove_unknown_id_is_a_noop(cart, burger):
    line = cart.add_item(burger, 1)

    cart.remove_item(uuid4().hex)

    assert cart.items == [line]
    assert cart.subtotal() == Decimal("12.99")


def test_add_then_remove_everything_in_any_order_empties_cart(cart):
    ids = [cart.add_item(MenuItemFactory(), random.randint(1, 10)).id for _ in range(8)]
    random.shuffle(ids)

    for line_id in ids:
        cart.remove_item(line_id)
        assert cart.total_item_count() == sum(line.quantity for line in cart.items)

    assert len(cart) == 0
    assert cart.subtotal() == 0


def test_clear_empties_cart(cart, burger, cheesecake):
    cart.add_item(burger, 2)
    cart.add_item(cheesecake, 3)

    cart.clear()

    assert not cart
    assert cart.total_item_count() == 0


def test_total_item_count_sums_quantities(cart, burger, cheesecake):
    cart.add_item(burger, 2)
    cart.add_item(cheesecake, 3)
    assert cart.total_item_count() == 5


def test_subtotal_scenario(cart, burger, cheesecake):
    cart.add_item(burger, 2)
    assert cart.subtotal() == Decimal("25.98")

    cart.add_item(cheesecake, 1)
    assert cart.subtotal() == Decimal("33.97")


def test_customizations_are_charged_once_per_unit(cart):
    item = MenuItemFactory(price=Decimal("10.00"))
    size = CustomizationFactory(
        options=[CustomizationOptionFactory(id="large", price=Decimal("2.00"))],
    )
    size.select("large")
    extras = CustomizationFactory(options=[CustomizationOptionFactory(id="bacon", price=Decimal("1.50"))])
    extras.select("bacon")
    unselected = CustomizationFactory()

    cart.add_item(item, 3, [size, extras, unselected])

    # (10.00 + 2.00 + 1.50) * 3
    assert cart.subtotal() == Decimal("40.50")


def test_cart_line_keeps_its_own_customization_copy(cart):
    item = MenuItemFactory(price=Decimal("5.00"))
    topping = CustomizationFactory(options=[CustomizationOptionFactory(id="berries", price=Decimal("1.50"))])
    topping.select("berries")

    line = cart.add_item(item, 1, [topping])
    topping.select(None)

    assert line.customizations[0].selected_option is not None
    assert cart.subtotal() == Decimal("6.50")


def test_special_instructions_are_trimmed(cart, burger):
    line = cart.add_item(burger, 1, special_instructions="  no onions  ")
    assert line.special_instructions == "no onions"


def test_items_returns_a_copy(cart, burger):
    cart.add_item(burger, 1)
    cart.items.clear()
    assert len(cart) == 1


def test_get_finds_line_by_id(cart, burger):
    line = cart.add_item(burger, 1)
    assert cart.get(line.id) is line
    assert cart.get("missing") is None


def test_fresh_cart_is_empty():
    cart = Cart()
    assert cart.items == []
    assert cart.subtotal() == Decimal("0.00")
