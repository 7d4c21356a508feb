"""Property test: Order aggregate invariants.

Uses hypothesis to generate random orders and random sequences of
operations, and verifies after every step that:
- the total always equals the sum of line totals,
- a paid order never changes,
- each successful operation records exactly one event and a failed one none.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from order_management.core.enums import OrderStatus
from order_management.core.errors import OrderCannotBeModified, OrderError
from order_management.core.ids import OrderId, ProductId
from order_management.domain.address import Address
from order_management.domain.events import (
    OrderAddressChanged,
    OrderPaid,
    OrderProductChanged,
)
from order_management.domain.order import Order
from order_management.domain.order_item import OrderItem

ADDRESS = Address(province="Sichuan", city="Chengdu", detail="Tianfu Street 1")

prices = st.decimals(
    min_value=Decimal("0.01"),
    max_value=Decimal("9999.99"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
counts = st.integers(min_value=1, max_value=50)


@st.composite
def item_lists(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    return [
        OrderItem(product_id=ProductId(f"p{i}"), count=draw(counts), item_price=draw(prices))
        for i in range(n)
    ]


operations = st.one_of(
    st.tuples(st.just("count"), st.integers(min_value=0, max_value=8), st.integers(-1, 20)),
    st.tuples(st.just("pay"), st.booleans()),
    st.tuples(st.just("address"), st.text(min_size=1, max_size=12)),
)


def _expected_total(order: Order) -> Decimal:
    return sum((i.item_price * i.count for i in order.items), Decimal("0"))


def _state(order: Order):
    return (
        order.id,
        order.created_at,
        order.total_price,
        order.status,
        order.address,
        [(i.product_id, i.count) for i in order.items],
    )


def _apply(order: Order, op) -> type:
    kind = op[0]
    if kind == "count":
        order.change_product_count(ProductId(f"p{op[1]}"), op[2])
        return OrderProductChanged
    if kind == "pay":
        amount = order.total_price if op[1] else order.total_price + Decimal("0.01")
        order.pay(amount)
        return OrderPaid
    order.change_address_detail(op[1])
    return OrderAddressChanged


@given(items=item_lists(), ops=st.lists(operations, max_size=15))
def test_random_operations_preserve_invariants(items, ops):
    order = Order.create(OrderId("prop"), items, ADDRESS)
    assert order.total_price == _expected_total(order)
    order.pull_events()

    for op in ops:
        before = _state(order)
        was_paid = order.is_paid
        try:
            expected_kind = _apply(order, op)
        except OrderError:
            # Failed call: nothing changed, nothing recorded
            assert _state(order) == before
            assert order.pending_events == ()
        else:
            assert not was_paid
            events = order.pull_events()
            assert [type(e) for e in events] == [expected_kind]

        if was_paid:
            assert _state(order) == before
        assert order.total_price == _expected_total(order)


@given(items=item_lists(), new_count=counts, detail=st.text(min_size=1, max_size=12))
def test_paid_order_is_read_only(items, new_count, detail):
    order = Order.create(OrderId("paid"), items, ADDRESS)
    order.pay(order.total_price)
    order.pull_events()
    before = _state(order)

    with pytest.raises(OrderCannotBeModified):
        order.change_product_count(items[0].product_id, new_count)
    with pytest.raises(OrderCannotBeModified):
        order.change_address_detail(detail)

    assert _state(order) == before
    assert order.status == OrderStatus.PAID
    assert order.pending_events == ()
