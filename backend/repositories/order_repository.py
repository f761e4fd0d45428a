"""
Order repository: entity queries with different association loading strategies.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload

from models import Order, OrderItem
from constants import Pagination
from dtos.request.order_search import OrderSearch
from .base_repository import BaseRepository
from .specifications import Specification

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository[Order]):
    """Repository for Order entity operations."""

    def __init__(self, db: Session):
        super().__init__(db, Order)

    def save(self, order: Order) -> Order:
        """Persist a new order together with its items and delivery."""
        return self.create(order)

    def find_one(self, order_id: int) -> Optional[Order]:
        return self.get_by_id(order_id)

    def find(self, spec: Specification[Order], limit: int = Pagination.SEARCH_MAX_RESULTS) -> List[Order]:
        """
        Find orders matching a specification.

        Order.member is joined (not fetched) so member columns can be filtered on.

        Args:
            spec: Specification to match orders against
            limit: Maximum number of orders returned

        Returns:
            Matching orders with all associations still lazy
        """
        query = self.db.query(self.model).join(self.model.member)
        if spec is not None:
            query = query.filter(spec.to_sql_filter())
        return query.order_by(self.model.id).limit(limit).all()

    def find_all_by_search(self, order_search: Optional[OrderSearch] = None) -> List[Order]:
        """
        Search orders by member name and status.

        Associations are left lazy, so building DTOs from the result issues
        extra SELECTs per order (member, delivery, items) and per order item.

        Args:
            order_search: Optional filters; None or empty matches everything

        Returns:
            Up to SEARCH_MAX_RESULTS orders
        """
        order_search = order_search or OrderSearch()
        logger.debug(f"Searching orders (lazy associations): {order_search.model_dump(exclude_none=True)}")
        return self.find(order_search.to_specification())

    def find_all_with_member_delivery(self, offset: int = 0, limit: Optional[int] = None) -> List[Order]:
        """
        Page through orders with to-one associations fetched in the same query.

        Member and delivery are joined into the root SELECT, which keeps one
        row per order so OFFSET/LIMIT stay correct. The order_items collection
        and their items are loaded afterwards with one IN query each for the
        whole page.

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders, None for all

        Returns:
            Orders ready for DTO mapping without further lazy loads
        """
        logger.debug(f"Loading orders with member/delivery join, batched items (offset={offset}, limit={limit})")
        query = self.db.query(self.model).options(
            joinedload(self.model.member),
            joinedload(self.model.delivery),
            selectinload(self.model.order_items).selectinload(OrderItem.item),
        ).order_by(self.model.id)

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_all_with_item(self) -> List[Order]:
        """
        Load orders with member, delivery, order_items and items in one SELECT.

        The collection join repeats each order once per item; the ORM folds
        the rows back to one Order per identity. Not safe to paginate.

        Returns:
            Distinct orders with every association populated
        """
        logger.debug("Loading orders with full fetch join")
        return self.db.query(self.model).options(
            joinedload(self.model.member),
            joinedload(self.model.delivery),
            joinedload(self.model.order_items).joinedload(OrderItem.item),
        ).order_by(self.model.id).all()
