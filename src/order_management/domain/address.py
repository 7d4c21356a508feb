"""Delivery address value object."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Address(BaseModel):
    """Immutable delivery address.

    Changes never mutate an instance; they return a new one with every
    other field carried over.
    """

    province: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    detail: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def change_detail_to(self, detail: str) -> Address:
        """Return a copy of this address with ``detail`` replaced."""
        return Address(province=self.province, city=self.city, detail=detail)
