"""In-memory order repository."""

from __future__ import annotations

import logging

from order_management.core.errors import OrderNotFound
from order_management.core.ids import OrderId
from order_management.domain.order import Order

logger = logging.getLogger(__name__)


class InMemoryOrderRepository:
    """Dict-backed ``IOrderRepository`` for tests and single-process use.

    Stores aggregate instances as-is; callers must drain events before
    or after ``save`` themselves.
    """

    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}

    def save(self, order: Order) -> None:
        self._orders[order.id] = order
        logger.debug("Order saved: order_id=%s status=%s", order.id, order.status.value)

    def by_id(self, order_id: OrderId) -> Order:
        try:
            return self._orders[order_id]
        except KeyError:
            raise OrderNotFound(order_id) from None

    def exists(self, order_id: OrderId) -> bool:
        return order_id in self._orders

    def __len__(self) -> int:
        return len(self._orders)
