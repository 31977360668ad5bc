"""Owner-facing order board kept in memory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from tabletap.models import OrderStatus, OrderType, PlacedOrder
from tabletap.pricing import ZERO

logger = logging.getLogger(__name__)

_NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.IN_PROGRESS,
    OrderStatus.IN_PROGRESS: OrderStatus.COMPLETED,
}


@dataclass(frozen=True)
class BoardStats:
    pending: int
    in_progress: int
    completed: int
    revenue: Decimal


class OrderBoard:
    def __init__(self, orders: Iterable[PlacedOrder] = ()) -> None:
        self._orders: list[PlacedOrder] = list(orders)

    @property
    def orders(self) -> list[PlacedOrder]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def get(self, order_id: str) -> PlacedOrder | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def next_order_id(self) -> str:
        numeric = [int(order.id) for order in self._orders if order.id.isdigit()]
        return str(max(numeric, default=1000) + 1)

    def add(self, order: PlacedOrder) -> None:
        if self.get(order.id) is not None:
            raise ValueError(f"order {order.id} is already on the board")
        self._orders.append(order)
        logger.info("board_add order=%s total=%s type=%s", order.id, order.total, order.order_type.value)

    def filter(self, search: str = "", order_type: OrderType | None = None) -> list[PlacedOrder]:
        """Match ``search`` against id or customer name, case-insensitively."""
        q = search.strip().lower()
        rows = self._orders
        if q:
            rows = [o for o in rows if q in o.id.lower() or q in o.customer_name.lower()]
        if order_type is not None:
            rows = [o for o in rows if o.order_type is order_type]
        return list(rows)

    def advance(self, order_id: str) -> PlacedOrder | None:
        """Accept a pending order or complete one in progress."""
        order = self.get(order_id)
        if order is None:
            return None
        next_status = _NEXT_STATUS.get(order.status)
        if next_status is not None:
            logger.info("board_advance order=%s %s -> %s", order.id, order.status.value, next_status.value)
            order.status = next_status
        return order

    def stats(self) -> BoardStats:
        counts = {status: 0 for status in OrderStatus}
        for order in self._orders:
            counts[order.status] += 1
        return BoardStats(
            pending=counts[OrderStatus.PENDING],
            in_progress=counts[OrderStatus.IN_PROGRESS],
            completed=counts[OrderStatus.COMPLETED],
            revenue=sum((o.total for o in self._orders), ZERO),
        )
