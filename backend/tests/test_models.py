"""Tests for order domain behaviour: stock, cancellation and totals."""

import pytest

from constants import OrderStatus, DeliveryStatus
from exceptions import NotEnoughStockError, OrderCancellationError
from models import Address, Book, Delivery, Member, Order, OrderItem


def _order_with(book: Book, count: int, delivery_status=DeliveryStatus.READY) -> Order:
    member = Member(name="member1", address=Address("Seoul", "River", "123-123"))
    delivery = Delivery(address=member.address, status=delivery_status)
    return Order.create_order(member, delivery, OrderItem.create_order_item(book, book.price, count))


class TestStock:
    def test_create_order_item_removes_stock(self):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)

        order_item = OrderItem.create_order_item(book, 10000, 2)

        assert book.stock_quantity == 8
        assert order_item.item is book
        assert order_item.get_total_price() == 20000

    def test_ordering_more_than_stock_fails(self):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)

        with pytest.raises(NotEnoughStockError) as exc_info:
            OrderItem.create_order_item(book, 10000, 11)

        assert exc_info.value.details == {"item_name": "JPA BOOK", "available": 10, "requested": 11}
        assert book.stock_quantity == 10


class TestOrder:
    def test_create_order(self):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)

        order = _order_with(book, 3)

        assert order.status == OrderStatus.ORDER
        assert order.member.name == "member1"
        assert order.delivery.address == Address("Seoul", "River", "123-123")
        assert len(order.order_items) == 1
        assert order.get_total_price() == 30000

    def test_cancel_restores_stock(self):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)
        order = _order_with(book, 4)

        order.cancel()

        assert order.status == OrderStatus.CANCEL
        assert book.stock_quantity == 10

    def test_cancel_after_delivery_fails(self):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)
        order = _order_with(book, 4, delivery_status=DeliveryStatus.COMP)

        with pytest.raises(OrderCancellationError):
            order.cancel()

        assert order.status == OrderStatus.ORDER
        assert book.stock_quantity == 6

    def test_order_persists_with_cascades(self, db_session):
        book = Book(name="JPA BOOK", price=10000, stock_quantity=10)
        db_session.add(book)
        order = _order_with(book, 1)

        db_session.add(order)
        db_session.commit()

        assert order.id is not None
        assert order.delivery.id is not None
        assert order.member.id is not None
        assert db_session.query(OrderItem).count() == 1
        assert db_session.get(Book, book.id).dtype == "B"
