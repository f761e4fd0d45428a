import os
import sys
import tempfile
from pathlib import Path

# Point configuration at throwaway locations before any app module is imported
os.environ.setdefault("ORDER_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("ORDER_API_SEED_DATA", "false")
os.environ.setdefault("ORDER_API_LOG_DIR", str(Path(tempfile.gettempdir()) / "order-api-tests"))

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from database import Base, build_engine, get_db
from init_db import seed_sample_data


@pytest.fixture
def engine():
    """In-memory database shared by every session of a test"""
    engine = build_engine('sqlite://', echo=False, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create an empty database session for testing"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded_factory(session_factory):
    """Session factory over a database holding the sample orders"""
    session = session_factory()
    seed_sample_data(session)
    session.close()
    return session_factory


@pytest.fixture
def seeded_session(seeded_factory):
    """Fresh session (empty identity map) over the sample orders"""
    session = seeded_factory()
    yield session
    session.close()


@pytest.fixture
def client(seeded_factory):
    """TestClient whose requests each get a new session over the sample orders"""
    from main import app

    def override_get_db():
        db = seeded_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_orders(session, count: int, items_per_order: int = 2) -> None:
    """Insert `count` orders, each with its own member, delivery and books"""
    from models import Address, Book, Delivery, Member, Order, OrderItem

    for n in range(count):
        member = Member(name=f"member{n}", address=Address("Seoul", str(n), f"{n:04d}"))
        order_items = []
        for i in range(items_per_order):
            book = Book(name=f"BOOK {n}-{i}", price=1000 * (i + 1), stock_quantity=10)
            session.add(book)
            order_items.append(OrderItem.create_order_item(book, book.price, i + 1))
        delivery = Delivery(address=Address("Seoul", str(n), f"{n:04d}"))
        session.add(Order.create_order(member, delivery, *order_items))
    session.commit()


@pytest.fixture
def orders_factory(session_factory):
    """Build a session factory over a database holding `count` orders"""
    def build(count: int, items_per_order: int = 2):
        session = session_factory()
        add_orders(session, count, items_per_order)
        session.close()
        return session_factory

    return build


@pytest.fixture
def order_adder():
    """Expose add_orders to tests that extend an existing database"""
    return add_orders
