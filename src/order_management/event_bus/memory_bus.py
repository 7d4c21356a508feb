"""In-memory event bus for order domain events.

Subscribers register per topic under a consumer group and may narrow the
subscription to specific event types (billing only cares about
``OrderPaid``, shipping about ``OrderAddressChanged``).  Handlers run
sequentially in subscription order; a failing handler is logged and the
remaining handlers still run.

Every published event is kept in history so tests and replay tooling can
ask "what did order X emit on topic Y".
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Iterable

from order_management.core.ids import OrderId
from order_management.domain.events import DomainEvent

logger = logging.getLogger(__name__)

Handler = Callable[[DomainEvent], Coroutine[Any, Any, None]]


@dataclass(frozen=True)
class _Subscription:
    group: str
    handler: Handler
    event_types: tuple[type[DomainEvent], ...] = ()

    def accepts(self, event: DomainEvent) -> bool:
        return not self.event_types or isinstance(event, self.event_types)


class MemoryEventBus:
    """Topic-based publish/subscribe bus held in process memory."""

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[_Subscription]] = defaultdict(list)
        self._history: list[tuple[str, DomainEvent]] = []

    async def subscribe(
        self,
        topic: str,
        group: str,
        handler: Handler,
        event_types: Iterable[type[DomainEvent]] = (),
    ) -> None:
        """Register ``handler`` on ``topic``; empty ``event_types`` means all."""
        self._subscriptions[topic].append(
            _Subscription(group, handler, tuple(event_types))
        )

    async def publish(self, topic: str, event: DomainEvent) -> None:
        self._history.append((topic, event))

        for sub in self._subscriptions.get(topic, []):
            if not sub.accepts(event):
                continue
            try:
                await sub.handler(event)
            except Exception:
                logger.exception(
                    "Handler error on topic=%s group=%s event=%s event_id=%s",
                    topic,
                    sub.group,
                    type(event).__name__,
                    event.event_id,
                )

    async def publish_all(self, topic: str, events: Iterable[DomainEvent]) -> int:
        """Publish ``events`` in order.  Returns how many were published."""
        count = 0
        for event in events:
            await self.publish(topic, event)
            count += 1
        return count

    def get_history(
        self,
        topic: str | None = None,
        order_id: OrderId | None = None,
    ) -> list[tuple[str, DomainEvent]]:
        """Published ``(topic, event)`` pairs, optionally filtered."""
        return [
            (t, e)
            for t, e in self._history
            if (topic is None or t == topic)
            and (order_id is None or getattr(e, "order_id", None) == order_id)
        ]

    def clear_history(self) -> None:
        self._history.clear()
