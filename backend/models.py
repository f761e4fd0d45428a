from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, composite
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from database import Base
from constants import OrderStatus, DeliveryStatus, ItemType
from exceptions import NotEnoughStockError, OrderCancellationError


@dataclass
class Address:
    """Postal address value object, embedded in members and deliveries."""
    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None


class Member(Base):
    __tablename__ = 'members'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    city = Column(String)
    street = Column(String)
    zipcode = Column(String)

    address = composite(Address, city, street, zipcode)

    orders = relationship("Order", back_populates="member")

    __table_args__ = (
        CheckConstraint("name != ''"),
    )


class Item(Base):
    """
    Sellable product.

    Single-table hierarchy discriminated by `dtype`:
    - B: Book (author, isbn)
    - A: Album (artist, etc)
    - M: Movie (director, actor)
    """
    __tablename__ = 'items'

    id = Column(Integer, primary_key=True)
    dtype = Column(String(1), nullable=False)
    name = Column(String, nullable=False)
    price = Column(Integer, nullable=False, default=0)
    stock_quantity = Column(Integer, nullable=False, default=0)

    __mapper_args__ = {'polymorphic_on': dtype}

    def add_stock(self, quantity: int) -> None:
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        rest_stock = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError(self.name, self.stock_quantity, quantity)
        self.stock_quantity = rest_stock


class Book(Item):
    author = Column(String)
    isbn = Column(String)

    __mapper_args__ = {'polymorphic_identity': ItemType.BOOK}


class Album(Item):
    artist = Column(String)
    etc = Column(String)

    __mapper_args__ = {'polymorphic_identity': ItemType.ALBUM}


class Movie(Item):
    director = Column(String)
    actor = Column(String)

    __mapper_args__ = {'polymorphic_identity': ItemType.MOVIE}


class Delivery(Base):
    __tablename__ = 'deliveries'

    id = Column(Integer, primary_key=True)
    city = Column(String)
    street = Column(String)
    zipcode = Column(String)
    status = Column(SAEnum(DeliveryStatus, native_enum=False, length=10), nullable=False,
                    default=DeliveryStatus.READY)

    address = composite(Address, city, street, zipcode)

    order = relationship("Order", back_populates="delivery", uselist=False)


class Order(Base):
    """
    A member's purchase of one or more items, shipped by one delivery.

    Every association is lazy: touching `member`, `delivery`, `order_items`
    or `order_item.item` on a freshly loaded order issues its own SELECT
    unless the query asked for it up front.
    """
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey('members.id'), nullable=False)
    delivery_id = Column(Integer, ForeignKey('deliveries.id'), unique=True)
    order_date = Column(DateTime, nullable=False, default=datetime.now)
    status = Column(SAEnum(OrderStatus, native_enum=False, length=10), nullable=False,
                    default=OrderStatus.ORDER)

    member = relationship("Member", back_populates="orders")
    delivery = relationship("Delivery", back_populates="order", cascade="all")
    order_items = relationship("OrderItem", back_populates="order",
                               cascade="all, delete-orphan", order_by="OrderItem.id")

    __table_args__ = (
        Index('idx_orders_member', 'member_id'),
    )

    def set_member(self, member: Member) -> None:
        self.member = member

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)

    def set_delivery(self, delivery: Delivery) -> None:
        self.delivery = delivery

    @classmethod
    def create_order(cls, member: Member, delivery: Delivery, *order_items: "OrderItem") -> "Order":
        """Build a new order in ORDER state for the given member."""
        order = cls(status=OrderStatus.ORDER, order_date=datetime.now())
        order.set_member(member)
        order.set_delivery(delivery)
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def cancel(self) -> None:
        """Cancel the order and return stock; not allowed once delivered."""
        if self.delivery is not None and self.delivery.status == DeliveryStatus.COMP:
            raise OrderCancellationError(self.id, "Order has already been delivered")
        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    def get_total_price(self) -> int:
        return sum(order_item.get_total_price() for order_item in self.order_items)


class OrderItem(Base):
    __tablename__ = 'order_items'

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey('orders.id'), nullable=False)
    item_id = Column(Integer, ForeignKey('items.id'), nullable=False)
    order_price = Column(Integer, nullable=False)
    count = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="order_items")
    item = relationship("Item")

    __table_args__ = (
        Index('idx_order_items_order', 'order_id'),
    )

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """Reserve `count` units of `item` at `order_price` each."""
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        self.item.add_stock(self.count)

    def get_total_price(self) -> int:
        return self.order_price * self.count
