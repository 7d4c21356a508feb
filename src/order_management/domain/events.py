"""Domain events raised by the order aggregate.

Design invariants
-----------------
1.  Every event is **immutable** (``frozen=True``).
2.  ``event_id`` is a UUID4 generated at creation time; it serves as the
    idempotency / dedup key for downstream consumers.
3.  Events that describe the whole order carry an ``OrderSnapshot`` taken
    after the aggregate's state was updated, never a live reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from order_management.core.enums import OrderStatus
from order_management.core.ids import OrderId, ProductId
from order_management.core.ids import new_id as _uuid
from order_management.core.ids import utc_now as _now
from order_management.domain.address import Address

# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OrderItemSnapshot:
    product_id: ProductId
    count: int
    item_price: Decimal
    total_price: Decimal


@dataclass(frozen=True)
class OrderSnapshot:
    """Point-in-time copy of an order's state."""

    order_id: OrderId
    items: tuple[OrderItemSnapshot, ...]
    total_price: Decimal
    status: OrderStatus
    address: Address
    created_at: datetime


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DomainEvent:
    """Immutable base for every order domain event.

    Shared fields
    ~~~~~~~~~~~~~
    event_id        Unique identity (UUID4).  Idempotency key.
    timestamp       UTC creation time.
    source          Writer module that produced this event.
    """

    event_id: str = field(default_factory=_uuid, kw_only=True)
    timestamp: datetime = field(default_factory=_now, kw_only=True)
    source: str = field(default="order", kw_only=True)


# =========================================================================
# Order lifecycle
# =========================================================================

@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """A new order was placed."""

    order: OrderSnapshot

    @property
    def order_id(self) -> OrderId:
        return self.order.order_id


@dataclass(frozen=True)
class OrderProductChanged(DomainEvent):
    """A line item count changed; ``order`` reflects the new total."""

    order: OrderSnapshot

    @property
    def order_id(self) -> OrderId:
        return self.order.order_id


@dataclass(frozen=True)
class OrderPaid(DomainEvent):
    order_id: OrderId


@dataclass(frozen=True)
class OrderAddressChanged(DomainEvent):
    """Delivery address detail was replaced."""

    order_id: OrderId
    new_detail: str
    old_detail: str


#: All order event types in a deterministic order.
ALL_ORDER_EVENTS: tuple[type[DomainEvent], ...] = (
    OrderCreated,
    OrderProductChanged,
    OrderPaid,
    OrderAddressChanged,
)
