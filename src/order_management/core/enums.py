"""Enumerations used across the order service."""

from enum import Enum


class OrderStatus(str, Enum):
    CREATED = "created"
    PAID = "paid"
