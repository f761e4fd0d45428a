"""
Order Query DTOs

View models filled directly from column projections; no entity is ever
materialized for them.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List

from constants import OrderStatus
from .order_response import AddressDto


class OrderItemQueryDto(BaseModel):
    """Item line projected from order_items joined with items."""

    order_id: int = Field(description="Owning order ID")
    item_name: str = Field(description="Item name")
    order_price: int = Field(description="Unit price at order time")
    count: int = Field(description="Ordered quantity")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class OrderQueryDto(BaseModel):
    """Order header projected from orders joined with members and deliveries."""

    order_id: int = Field(description="Order ID")
    name: str = Field(description="Ordering member name")
    order_date: datetime = Field(description="Order timestamp")
    order_status: OrderStatus = Field(description="Order status")
    address: AddressDto = Field(description="Delivery address")
    order_items: List[OrderItemQueryDto] = Field(default_factory=list, description="Ordered items")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
