"""Canonical identifier types and timestamp factories.

All modules import from here instead of defining local _uuid()/_now() copies.

ID Categories
-------------
1. Aggregate IDs: ``OrderId`` wraps a UUID v4 string assigned by the caller.
2. Reference IDs: ``ProductId`` wraps an opaque catalogue key.
3. Event IDs: plain UUID v4 strings from ``new_id()``.

Timestamp Rule
--------------
All timestamps are ``datetime`` with ``tzinfo=timezone.utc`` — never naive.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


def new_id() -> str:
    """Generate a new UUID v4 string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderId:
    """Identity of an order aggregate.  Compared by value."""

    value: str

    @classmethod
    def generate(cls) -> OrderId:
        return cls(new_id())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductId:
    """Reference to a catalogue product.  Compared by value."""

    value: str

    def __str__(self) -> str:
        return self.value
