"""Tests for folding flat join rows back into orders."""

from datetime import datetime

from constants import OrderStatus
from dtos.internal.order_flat_dto import OrderFlatDto, group_flat_rows

ORDER_DATE = datetime(2024, 1, 2, 3, 4, 5)


def _row(order_id: int, name: str, item_name: str, price: int = 1000, count: int = 1) -> OrderFlatDto:
    return OrderFlatDto(order_id, name, ORDER_DATE, OrderStatus.ORDER, "Seoul", "1", "1111",
                        item_name, price, count)


def test_groups_rows_by_order():
    orders = group_flat_rows([
        _row(1, "userA", "A1"),
        _row(1, "userA", "A2"),
        _row(2, "userB", "B1"),
    ])

    assert [order.order_id for order in orders] == [1, 2]
    assert [item.item_name for item in orders[0].order_items] == ["A1", "A2"]
    assert [item.item_name for item in orders[1].order_items] == ["B1"]


def test_keeps_first_appearance_order_for_interleaved_rows():
    orders = group_flat_rows([
        _row(7, "userB", "B1"),
        _row(3, "userA", "A1"),
        _row(7, "userB", "B2"),
    ])

    assert [order.order_id for order in orders] == [7, 3]
    assert [item.item_name for item in orders[0].order_items] == ["B1", "B2"]


def test_header_fields_come_from_the_row():
    order = group_flat_rows([_row(1, "userA", "A1", price=2500, count=3)])[0]

    assert order.name == "userA"
    assert order.order_date == ORDER_DATE
    assert order.order_status == OrderStatus.ORDER
    assert order.address.zipcode == "1111"
    item = order.order_items[0]
    assert (item.order_id, item.order_price, item.count) == (1, 2500, 3)


def test_no_rows():
    assert group_flat_rows([]) == []
