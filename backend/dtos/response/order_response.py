"""
Order Response DTOs

View models built by walking loaded Order entities. How many SQL statements
building them costs depends entirely on what the repository eagerly loaded.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional

from constants import OrderStatus


class AddressDto(BaseModel):
    """Postal address as exposed by the API."""

    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class OrderItemDto(BaseModel):
    """One ordered item line."""

    item_name: str = Field(description="Item name")
    order_price: int = Field(description="Unit price at order time")
    count: int = Field(description="Ordered quantity")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_entity(cls, order_item) -> "OrderItemDto":
        # Touches order_item.item, which is lazy
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(BaseModel):
    """
    Order view model for the entity-based endpoints (v2, v3, v3.1).

    Built with `from_entity`, which reads member, delivery, order_items and
    every item of the order.
    """

    order_id: int = Field(description="Order ID")
    name: str = Field(description="Ordering member name")
    order_date: datetime = Field(description="Order timestamp")
    order_status: OrderStatus = Field(description="Order status")
    address: AddressDto = Field(description="Delivery address")
    order_items: List[OrderItemDto] = Field(default_factory=list, description="Ordered items")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_entity(cls, order) -> "OrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDto.model_validate(order.delivery.address, from_attributes=True),
            order_items=[OrderItemDto.from_entity(oi) for oi in order.order_items],
        )
