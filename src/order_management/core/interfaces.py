"""Protocol interfaces for the order service.

Module boundaries are defined here as Protocol classes.
Implementations can be swapped (in-memory/database/broker) without
changing callers.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Iterable, Protocol, runtime_checkable

from order_management.core.ids import OrderId
from order_management.domain.events import DomainEvent
from order_management.domain.order import Order


# ---------------------------------------------------------------------------
# Event Bus
# ---------------------------------------------------------------------------

@runtime_checkable
class IEventBus(Protocol):
    """Publish/subscribe event bus."""

    async def publish(self, topic: str, event: DomainEvent) -> None: ...

    async def publish_all(self, topic: str, events: Iterable[DomainEvent]) -> int: ...

    async def subscribe(
        self,
        topic: str,
        group: str,
        handler: Callable[[DomainEvent], Coroutine[Any, Any, None]],
    ) -> None: ...


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

@runtime_checkable
class IOrderRepository(Protocol):
    """Stores and loads order aggregates by id."""

    def save(self, order: Order) -> None: ...

    def by_id(self, order_id: OrderId) -> Order:
        """Return the stored order or raise ``OrderNotFound``."""
        ...

    def exists(self, order_id: OrderId) -> bool: ...
