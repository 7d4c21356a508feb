"""Order application service.

Runs one use case per call: load (or create) the aggregate, invoke exactly
one aggregate operation, save it, then drain its recorded events and
publish them in raise order.  A use case that fails a business rule saves
nothing and publishes nothing; the error propagates to the caller.
"""

from __future__ import annotations

import logging
from typing import Callable

from order_management.application.commands import (
    ChangeAddressDetailCommand,
    ChangeProductCountCommand,
    CreateOrderCommand,
    PayOrderCommand,
)
from order_management.core.clock import IClock, WallClock
from order_management.core.config import Settings
from order_management.core.errors import EmptyOrderError, OrderError
from order_management.core.ids import OrderId, ProductId
from order_management.core.interfaces import IEventBus, IOrderRepository
from order_management.domain.order import Order
from order_management.observability.logger import use_case_context

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """Entry point for order use cases.

    Parameters
    ----------
    repository:
        Aggregate store.
    bus:
        Destination for drained domain events.
    clock:
        Time source for ``created_at`` (default ``WallClock``).
    settings:
        Order policy and event topic (default ``Settings()``).
    """

    def __init__(
        self,
        repository: IOrderRepository,
        bus: IEventBus,
        clock: IClock | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._repository = repository
        self._bus = bus
        self._clock = clock or WallClock()
        self._settings = settings or Settings()

    @property
    def topic(self) -> str:
        return self._settings.orders.event_topic

    # ------------------------------------------------------------------
    # Use cases
    # ------------------------------------------------------------------

    async def create_order(self, command: CreateOrderCommand) -> OrderId:
        order_id = OrderId.generate()
        with use_case_context("create_order", str(order_id)):
            if not command.items and self._settings.orders.reject_empty_orders:
                logger.warning("Order rejected: order_id=%s reason=no items", order_id)
                raise EmptyOrderError(f"Order [{order_id}] has no items")
            try:
                order = Order.create(
                    order_id,
                    [item.to_item() for item in command.items],
                    command.address.to_address(),
                    clock=self._clock,
                )
            except OrderError as exc:
                logger.warning("Order rejected: order_id=%s reason=%s", order_id, exc)
                raise

            await self._commit(order)
            logger.info(
                "Order created: order_id=%s items=%d total_price=%s",
                order_id,
                len(order.items),
                order.total_price,
            )
        return order_id

    async def change_product_count(
        self, order_id: OrderId, command: ChangeProductCountCommand
    ) -> None:
        product_id = ProductId(command.product_id)
        await self._apply(
            "change_product_count",
            order_id,
            lambda order: order.change_product_count(product_id, command.count),
        )

    async def pay(self, order_id: OrderId, command: PayOrderCommand) -> None:
        await self._apply(
            "pay",
            order_id,
            lambda order: order.pay(command.paid_price),
        )

    async def change_address_detail(
        self, order_id: OrderId, command: ChangeAddressDetailCommand
    ) -> None:
        await self._apply(
            "change_address_detail",
            order_id,
            lambda order: order.change_address_detail(command.detail),
        )

    def get_order(self, order_id: OrderId) -> Order:
        return self._repository.by_id(order_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _apply(
        self,
        use_case: str,
        order_id: OrderId,
        operation: Callable[[Order], None],
    ) -> None:
        with use_case_context(use_case, str(order_id)):
            try:
                order = self._repository.by_id(order_id)
                operation(order)
            except OrderError as exc:
                logger.warning(
                    "%s rejected: order_id=%s reason=%s", use_case, order_id, exc
                )
                raise

            await self._commit(order)
            logger.info(
                "%s completed: order_id=%s status=%s total_price=%s",
                use_case,
                order_id,
                order.status.value,
                order.total_price,
            )

    async def _commit(self, order: Order) -> None:
        self._repository.save(order)
        published = await self._bus.publish_all(self.topic, order.pull_events())
        logger.debug("Published %d event(s) to topic=%s", published, self.topic)
