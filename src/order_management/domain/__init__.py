"""Domain layer — order aggregate, value objects, domain events.

This package defines the bounded-context primitives that every other
layer depends on but never modifies.  Only the ``Order`` aggregate and
its line items carry mutable state.
"""

from order_management.domain.address import Address
from order_management.domain.events import (
    ALL_ORDER_EVENTS,
    DomainEvent,
    OrderAddressChanged,
    OrderCreated,
    OrderPaid,
    OrderProductChanged,
    OrderSnapshot,
)
from order_management.domain.order import Order
from order_management.domain.order_item import OrderItem

__all__ = [
    "Address",
    "ALL_ORDER_EVENTS",
    "DomainEvent",
    "Order",
    "OrderAddressChanged",
    "OrderCreated",
    "OrderItem",
    "OrderPaid",
    "OrderProductChanged",
    "OrderSnapshot",
]
