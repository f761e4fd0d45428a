"""
Internal Order Flat DTOs

One row of the orders x order_items join, before it is folded back into
per-order view models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List

from constants import OrderStatus
from dtos.response.order_response import AddressDto
from dtos.response.order_query_response import OrderQueryDto, OrderItemQueryDto


@dataclass
class OrderFlatDto:
    """
    Internal DTO for a single order/item row.

    Order header columns repeat on every row of the same order.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    city: str
    street: str
    zipcode: str
    item_name: str
    order_price: int
    count: int

    @property
    def address(self) -> AddressDto:
        return AddressDto(city=self.city, street=self.street, zipcode=self.zipcode)

    def to_order_header(self) -> OrderQueryDto:
        """Order part of the row, without items."""
        return OrderQueryDto(
            order_id=self.order_id,
            name=self.name,
            order_date=self.order_date,
            order_status=self.order_status,
            address=self.address,
        )

    def to_order_item(self) -> OrderItemQueryDto:
        """Item part of the row."""
        return OrderItemQueryDto(
            order_id=self.order_id,
            item_name=self.item_name,
            order_price=self.order_price,
            count=self.count,
        )


def group_flat_rows(rows: Iterable[OrderFlatDto]) -> List[OrderQueryDto]:
    """
    Fold flat join rows into one OrderQueryDto per order.

    Orders keep the position of their first row, items keep row order.

    Args:
        rows: Flat rows, any order

    Returns:
        List of orders with their items attached
    """
    grouped: Dict[int, OrderQueryDto] = {}
    for row in rows:
        order = grouped.get(row.order_id)
        if order is None:
            order = row.to_order_header()
            grouped[row.order_id] = order
        order.order_items.append(row.to_order_item())
    return list(grouped.values())
