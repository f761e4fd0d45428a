from sqlalchemy.orm import Session
import logging

from database import engine, Base, SessionLocal
from models import Member, Book, Delivery, Order, OrderItem, Address
from config.app_config import SEED_DATA

logger = logging.getLogger(__name__)


def _create_member(name: str, city: str, street: str, zipcode: str) -> Member:
    return Member(name=name, address=Address(city, street, zipcode))


def _create_book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def _create_delivery(member: Member) -> Delivery:
    return Delivery(address=Address(member.address.city, member.address.street, member.address.zipcode))


def seed_sample_data(db: Session) -> int:
    """
    Insert the two sample members, each with one two-item order.

    - userA (Seoul): JPA1 BOOK x1, JPA2 BOOK x2
    - userB (Jinju): SPRING1 BOOK x3, SPRING2 BOOK x4

    Args:
        db: Database session; committed on success

    Returns:
        Number of orders created
    """
    samples = [
        (("userA", "Seoul", "1", "1111"), [("JPA1 BOOK", 10000, 1), ("JPA2 BOOK", 20000, 2)]),
        (("userB", "Jinju", "2", "2222"), [("SPRING1 BOOK", 20000, 3), ("SPRING2 BOOK", 40000, 4)]),
    ]

    for member_args, lines in samples:
        member = _create_member(*member_args)
        db.add(member)

        order_items = []
        for name, price, count in lines:
            book = _create_book(name, price, stock_quantity=100 + count * 100)
            db.add(book)
            order_items.append(OrderItem.create_order_item(book, price, count))

        order = Order.create_order(member, _create_delivery(member), *order_items)
        db.add(order)

    db.commit()
    logger.info(f"Seeded {len(samples)} sample order(s)")
    return len(samples)


def init_database(seed: bool = SEED_DATA):
    """Create tables and, when enabled and the store has no orders, load sample data"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not seed:
        return

    db = SessionLocal()
    try:
        if db.query(Order).count() == 0:
            seed_sample_data(db)
        else:
            logger.info("Orders already present, skipping sample data")
    except Exception as e:
        logger.error(f"Failed to seed sample data: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
