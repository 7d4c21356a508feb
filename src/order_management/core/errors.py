"""Custom exception hierarchy for the order service."""

from __future__ import annotations

from decimal import Decimal

from .ids import OrderId, ProductId


class OrderManagementError(Exception):
    """Base exception for all order service errors."""


# --- Configuration ---
class ConfigError(OrderManagementError):
    """Invalid or missing configuration."""


# --- Order ---
class OrderError(OrderManagementError):
    """Order business rule violation."""


class OrderNotFound(OrderError):
    """No order is stored under the requested id."""

    def __init__(self, order_id: OrderId):
        self.order_id = order_id
        super().__init__(f"Order [{order_id}] not found")


class OrderCannotBeModified(OrderError):
    """The order is paid and no longer accepts changes."""

    def __init__(self, order_id: OrderId, message: str | None = None):
        self.order_id = order_id
        super().__init__(message or f"Order [{order_id}] is paid and cannot be modified")


class OrderAlreadyPaid(OrderCannotBeModified):
    """Payment was attempted on an order that is already paid."""

    def __init__(self, order_id: OrderId):
        super().__init__(order_id, f"Order [{order_id}] is already paid")


class ProductNotInOrder(OrderError):
    """Count change targets a product the order does not contain."""

    def __init__(self, product_id: ProductId, order_id: OrderId):
        self.product_id = product_id
        self.order_id = order_id
        super().__init__(f"Product [{product_id}] is not in order [{order_id}]")


class PaidPriceMismatch(OrderError):
    """Amount paid differs from the order total."""

    def __init__(self, order_id: OrderId, expected: Decimal, paid: Decimal):
        self.order_id = order_id
        self.expected = expected
        self.paid = paid
        super().__init__(
            f"Paid price {paid} does not match price {expected} of order [{order_id}]"
        )


class DuplicateProductInOrder(OrderError):
    """The same product appears in more than one line item."""

    def __init__(self, product_id: ProductId):
        self.product_id = product_id
        super().__init__(f"Product [{product_id}] appears more than once in order items")


class EmptyOrderError(OrderError):
    """Order creation was requested without any line items."""


class InvalidItemCount(OrderError):
    """Line item count must be a positive integer."""

    def __init__(self, product_id: ProductId, count: int):
        self.product_id = product_id
        self.count = count
        super().__init__(f"Invalid count {count} for product [{product_id}]")


class InvalidItemPrice(OrderError):
    """Line item price must be a finite, non-negative Decimal."""

    def __init__(self, product_id: ProductId, price: object):
        self.product_id = product_id
        self.price = price
        super().__init__(f"Invalid price {price!r} for product [{product_id}]")
