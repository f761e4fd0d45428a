"""Tests for sample data seeding."""

from init_db import seed_sample_data, init_database
from database import SessionLocal
from models import Member, Order, Item


def test_seed_sample_data(db_session):
    assert seed_sample_data(db_session) == 2

    assert [m.name for m in db_session.query(Member).order_by(Member.id)] == ["userA", "userB"]
    assert db_session.query(Item).count() == 4
    totals = [order.get_total_price() for order in db_session.query(Order).order_by(Order.id)]
    assert totals == [10000 + 20000 * 2, 20000 * 3 + 40000 * 4]


def test_seeded_stock_reflects_orders(db_session):
    seed_sample_data(db_session)

    stock = {item.name: item.stock_quantity for item in db_session.query(Item)}
    assert stock == {"JPA1 BOOK": 199, "JPA2 BOOK": 298, "SPRING1 BOOK": 397, "SPRING2 BOOK": 496}


def test_init_database_seeds_once():
    init_database(seed=True)
    init_database(seed=True)

    db = SessionLocal()
    try:
        assert db.query(Order).count() == 2
    finally:
        db.close()
