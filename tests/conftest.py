"""Shared fixtures for the order-management test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from order_management.application.repository import InMemoryOrderRepository
from order_management.application.service import OrderApplicationService
from order_management.core.clock import SimClock
from order_management.core.ids import OrderId, ProductId
from order_management.domain.address import Address
from order_management.domain.order import Order
from order_management.domain.order_item import OrderItem
from order_management.event_bus.memory_bus import MemoryEventBus


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock starting at 2024-06-01 00:00 UTC."""
    return SimClock(start=datetime(2024, 6, 1, tzinfo=timezone.utc))


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@pytest.fixture
def address() -> Address:
    return Address(province="Sichuan", city="Chengdu", detail="Tianfu Street 1")


@pytest.fixture
def product_a() -> ProductId:
    return ProductId("product-a")


@pytest.fixture
def product_b() -> ProductId:
    return ProductId("product-b")


@pytest.fixture
def two_items(product_a, product_b) -> list[OrderItem]:
    """10.00 x 2 and 5.00 x 1, total 25.00."""
    return [
        OrderItem(product_id=product_a, count=2, item_price=Decimal("10.00")),
        OrderItem(product_id=product_b, count=1, item_price=Decimal("5.00")),
    ]


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

@pytest.fixture
def order(two_items, address, sim_clock) -> Order:
    """A freshly created order with its OrderCreated event still pending."""
    return Order.create(OrderId("order-1"), two_items, address, clock=sim_clock)


# ---------------------------------------------------------------------------
# Application layer
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_bus() -> MemoryEventBus:
    """Return a fresh MemoryEventBus instance."""
    return MemoryEventBus()


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def service(repository, memory_bus, sim_clock) -> OrderApplicationService:
    return OrderApplicationService(repository, memory_bus, clock=sim_clock)
