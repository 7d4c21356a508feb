"""Order line item."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_management.core.errors import InvalidItemCount, InvalidItemPrice
from order_management.core.ids import ProductId


@dataclass
class OrderItem:
    """A single product-and-quantity entry within an order.

    Mutable: the owning ``Order`` changes ``count`` through ``update_count``.
    """

    product_id: ProductId
    count: int
    item_price: Decimal

    def __post_init__(self) -> None:
        _check_count(self.product_id, self.count)
        _check_price(self.product_id, self.item_price)

    def total_price(self) -> Decimal:
        return self.item_price * self.count

    def update_count(self, count: int) -> None:
        """Set a new count.  Raises ``InvalidItemCount`` before mutating."""
        _check_count(self.product_id, count)
        self.count = count


def _check_count(product_id: ProductId, count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidItemCount(product_id, count)


def _check_price(product_id: ProductId, price: Decimal) -> None:
    if not isinstance(price, Decimal) or not price.is_finite() or price < 0:
        raise InvalidItemPrice(product_id, price)
