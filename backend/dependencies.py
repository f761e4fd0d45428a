"""
Dependency injection providers for FastAPI.

Factory functions for the repositories the routers use, so tests can swap
the database session (via `get_db`) or a whole repository.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.order_repository import OrderRepository
from repositories.order_query_repository import OrderQueryRepository


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    """
    Factory function for creating OrderRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        OrderRepository instance
    """
    return OrderRepository(db)


def get_order_query_repository(db: Session = Depends(get_db)) -> OrderQueryRepository:
    """
    Factory function for creating OrderQueryRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        OrderQueryRepository instance
    """
    return OrderQueryRepository(db)
