"""Order aggregate root.

The order owns its line items and delivery address.  Every public
mutation validates against the current status first, updates state, and
only then records one domain event.  A failed call changes nothing and
records nothing.

Recorded events stay on the instance until the owner drains them with
``pull_events()``, normally right after the use case has been persisted.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Sequence

from order_management.core.clock import IClock, WallClock
from order_management.core.enums import OrderStatus
from order_management.core.errors import (
    DuplicateProductInOrder,
    OrderAlreadyPaid,
    OrderCannotBeModified,
    PaidPriceMismatch,
    ProductNotInOrder,
)
from order_management.core.ids import OrderId, ProductId
from order_management.domain.address import Address
from order_management.domain.events import (
    DomainEvent,
    OrderAddressChanged,
    OrderCreated,
    OrderItemSnapshot,
    OrderPaid,
    OrderProductChanged,
    OrderSnapshot,
)
from order_management.domain.order_item import OrderItem


class Order:
    """Customer order aggregate.

    ``__init__`` rebuilds an order from already-valid state (e.g. a
    repository) and records no events.  New orders come from ``create``.
    """

    def __init__(
        self,
        order_id: OrderId,
        items: Sequence[OrderItem],
        address: Address,
        status: OrderStatus,
        created_at: datetime,
    ) -> None:
        self._id = order_id
        self._items: list[OrderItem] = [replace(item) for item in items]
        self._address = address
        self._status = status
        self._created_at = created_at
        self._total_price = self._calculate_total_price()
        self._events: list[DomainEvent] = []

    @classmethod
    def create(
        cls,
        order_id: OrderId,
        items: Sequence[OrderItem],
        address: Address,
        clock: IClock | None = None,
    ) -> Order:
        """Place a new order and record ``OrderCreated``.

        Raises ``DuplicateProductInOrder`` if two items share a product.
        An empty item list is accepted and yields a zero total.
        """
        seen: set[ProductId] = set()
        for item in items:
            if item.product_id in seen:
                raise DuplicateProductInOrder(item.product_id)
            seen.add(item.product_id)

        order = cls(
            order_id,
            items,
            address,
            status=OrderStatus.CREATED,
            created_at=(clock or WallClock()).now(),
        )
        order._record(OrderCreated(order=order.snapshot()))
        return order

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def id(self) -> OrderId:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def total_price(self) -> Decimal:
        return self._total_price

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(replace(item) for item in self._items)

    @property
    def address(self) -> Address:
        return self._address

    @property
    def is_paid(self) -> bool:
        return self._status == OrderStatus.PAID

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def change_product_count(self, product_id: ProductId, count: int) -> None:
        self._ensure_modifiable()

        item = self._retrieve_item(product_id)
        item.update_count(count)
        self._total_price = self._calculate_total_price()
        self._record(OrderProductChanged(order=self.snapshot()))

    def pay(self, paid_price: Decimal) -> None:
        """Mark the order paid.  ``paid_price`` must equal the total exactly."""
        if self.is_paid:
            raise OrderAlreadyPaid(self._id)
        if paid_price != self._total_price:
            raise PaidPriceMismatch(self._id, self._total_price, paid_price)

        self._status = OrderStatus.PAID
        self._record(OrderPaid(order_id=self._id))

    def change_address_detail(self, detail: str) -> None:
        self._ensure_modifiable()

        old_detail = self._address.detail
        self._address = self._address.change_detail_to(detail)
        self._record(
            OrderAddressChanged(
                order_id=self._id,
                new_detail=self._address.detail,
                old_detail=old_detail,
            )
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._events)

    def pull_events(self) -> list[DomainEvent]:
        """Return recorded events in raise order and clear the buffer."""
        events, self._events = self._events, []
        return events

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            order_id=self._id,
            items=tuple(
                OrderItemSnapshot(
                    product_id=item.product_id,
                    count=item.count,
                    item_price=item.item_price,
                    total_price=item.total_price(),
                )
                for item in self._items
            ),
            total_price=self._total_price,
            status=self._status,
            address=self._address,
            created_at=self._created_at,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_modifiable(self) -> None:
        if self.is_paid:
            raise OrderCannotBeModified(self._id)

    def _retrieve_item(self, product_id: ProductId) -> OrderItem:
        for item in self._items:
            if item.product_id == product_id:
                return item
        raise ProductNotInOrder(product_id, self._id)

    def _calculate_total_price(self) -> Decimal:
        return sum((item.total_price() for item in self._items), Decimal("0"))

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, status={self._status.value}, "
            f"total_price={self._total_price}, items={len(self._items)})"
        )
