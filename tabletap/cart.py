"""In-memory shopping cart."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

from tabletap.config import MAX_QUANTITY, MIN_QUANTITY
from tabletap.models import Customization, MenuItem, OrderItem
from tabletap.pricing import ZERO, line_total

logger = logging.getLogger(__name__)


def clamp_quantity(quantity: int) -> int:
    """Clamp a requested quantity to the stepper range."""
    return max(MIN_QUANTITY, min(MAX_QUANTITY, int(quantity)))


class Cart:
    """Ordered collection of order lines for the current session.

    Lines are keyed by their own id, not by menu item, so adding the same item
    twice produces two independent lines.
    """

    def __init__(self) -> None:
        self._items: list[OrderItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def items(self) -> list[OrderItem]:
        return list(self._items)

    def get(self, order_item_id: str) -> OrderItem | None:
        for item in self._items:
            if item.id == order_item_id:
                return item
        return None

    def add_item(
        self,
        menu_item: MenuItem,
        quantity: int = 1,
        customizations: Iterable[Customization] = (),
        special_instructions: str = "",
    ) -> OrderItem:
        """Append a new line and return it."""
        line = OrderItem(
            id=uuid4().hex,
            menu_item=menu_item,
            quantity=clamp_quantity(quantity),
            # Copy so later edits in the detail screen don't leak into the cart.
            customizations=[replace(c, options=list(c.options)) for c in customizations],
            special_instructions=special_instructions.strip(),
        )
        self._items.append(line)
        logger.info("cart_add line=%s item=%s qty=%d", line.id[:8], menu_item.id, line.quantity)
        return line

    def remove_item(self, order_item_id: str) -> None:
        for idx, item in enumerate(self._items):
            if item.id == order_item_id:
                del self._items[idx]
                logger.info("cart_remove line=%s", order_item_id[:8])
                return
        logger.debug("cart_remove_missing line=%s", order_item_id[:8])

    def clear(self) -> None:
        self._items.clear()
        logger.info("cart_clear")

    def total_item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def subtotal(self) -> Decimal:
        return sum((line_total(item) for item in self._items), ZERO)
