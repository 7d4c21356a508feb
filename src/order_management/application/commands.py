"""Use-case input commands.

Plain Pydantic models so transport layers can build them straight from
request payloads.  Field validation here covers shape only; business
rules stay in the aggregate.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from order_management.core.ids import ProductId
from order_management.domain.address import Address
from order_management.domain.order_item import OrderItem


class OrderItemCommand(BaseModel):
    product_id: str = Field(..., min_length=1)
    count: int
    item_price: Decimal = Field(..., ge=0)

    def to_item(self) -> OrderItem:
        return OrderItem(
            product_id=ProductId(self.product_id),
            count=self.count,
            item_price=self.item_price,
        )


class AddressCommand(BaseModel):
    province: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    detail: str = Field(..., min_length=1)

    def to_address(self) -> Address:
        return Address(province=self.province, city=self.city, detail=self.detail)


class CreateOrderCommand(BaseModel):
    items: list[OrderItemCommand] = Field(default_factory=list)
    address: AddressCommand


class ChangeProductCountCommand(BaseModel):
    product_id: str = Field(..., min_length=1)
    count: int


class PayOrderCommand(BaseModel):
    paid_price: Decimal


class ChangeAddressDetailCommand(BaseModel):
    detail: str = Field(..., min_length=1)
