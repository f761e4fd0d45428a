"""
Order query repository: column projections straight into view models.

Nothing here loads an entity, so no lazy association can fire; the number of
SELECTs is exactly what each method issues.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence
from sqlalchemy.orm import Session

from models import Order, OrderItem, Member, Delivery, Item
from dtos.response.order_response import AddressDto
from dtos.response.order_query_response import OrderQueryDto, OrderItemQueryDto
from dtos.internal.order_flat_dto import OrderFlatDto

logger = logging.getLogger(__name__)


class OrderQueryRepository:
    """Read-only DTO projections over orders."""

    def __init__(self, db: Session):
        self.db = db

    def _order_header_query(self):
        return self.db.query(
            Order.id,
            Member.name,
            Order.order_date,
            Order.status,
            Delivery.city,
            Delivery.street,
            Delivery.zipcode,
        ).join(Order.member).join(Order.delivery).order_by(Order.id)

    def _find_orders(self) -> List[OrderQueryDto]:
        return [
            OrderQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressDto(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in self._order_header_query().all()
        ]

    def _order_item_query(self):
        return self.db.query(
            OrderItem.order_id,
            Item.name,
            OrderItem.order_price,
            OrderItem.count,
        ).join(OrderItem.item).order_by(OrderItem.id)

    @staticmethod
    def _to_item_dto(row) -> OrderItemQueryDto:
        order_id, item_name, order_price, count = row
        return OrderItemQueryDto(order_id=order_id, item_name=item_name, order_price=order_price, count=count)

    def find_order_items(self, order_id: int) -> List[OrderItemQueryDto]:
        """
        Project the item lines of a single order.

        Args:
            order_id: Order ID

        Returns:
            Item lines in insertion order
        """
        rows = self._order_item_query().filter(OrderItem.order_id == order_id).all()
        return [self._to_item_dto(row) for row in rows]

    def find_order_items_by_order_ids(self, order_ids: Sequence[int]) -> Dict[int, List[OrderItemQueryDto]]:
        """
        Project the item lines of many orders with a single IN query.

        Args:
            order_ids: Order IDs to load items for

        Returns:
            Mapping of order ID to its item lines; orders without items are absent
        """
        if not order_ids:
            return {}
        rows = self._order_item_query().filter(OrderItem.order_id.in_(order_ids)).all()

        items_by_order: Dict[int, List[OrderItemQueryDto]] = defaultdict(list)
        for row in rows:
            dto = self._to_item_dto(row)
            items_by_order[dto.order_id].append(dto)
        return dict(items_by_order)

    def find_order_query_dtos(self) -> List[OrderQueryDto]:
        """
        One query for the order headers, then one query per order for its items.

        Returns:
            Orders with items attached (1 + N SELECTs)
        """
        orders = self._find_orders()
        logger.debug(f"Loading items for {len(orders)} order(s) one order at a time")
        for order in orders:
            order.order_items = self.find_order_items(order.order_id)
        return orders

    def find_all_by_dto_optimization(self) -> List[OrderQueryDto]:
        """
        One query for the order headers, one IN query for all their items.

        Returns:
            Orders with items attached (2 SELECTs)
        """
        orders = self._find_orders()
        order_ids = [order.order_id for order in orders]
        logger.debug(f"Loading items for {len(order_ids)} order(s) in one IN query")

        items_by_order = self.find_order_items_by_order_ids(order_ids)
        for order in orders:
            order.order_items = items_by_order.get(order.order_id, [])
        return orders

    def find_all_by_dto_flat(self) -> List[OrderFlatDto]:
        """
        Single SELECT joining orders, members, deliveries, order_items and items.

        Orders without items do not appear. Each order repeats once per item.

        Returns:
            One flat row per order item
        """
        rows = self.db.query(
            Order.id,
            Member.name,
            Order.order_date,
            Order.status,
            Delivery.city,
            Delivery.street,
            Delivery.zipcode,
            Item.name,
            OrderItem.order_price,
            OrderItem.count,
        ).join(Order.member).join(Order.delivery).join(Order.order_items).join(OrderItem.item) \
            .order_by(Order.id, OrderItem.id).all()

        return [OrderFlatDto(*row) for row in rows]
