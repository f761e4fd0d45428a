"""
Specification Pattern Implementation

Encapsulates query criteria in reusable specifications that render as
SQLAlchemy filter expressions and compose with `&`.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from sqlalchemy import and_


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single query criterion.
    """

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy filter expression
        """
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Specification that combines two specifications with AND."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        """
        Initialize AND specification.

        Args:
            left: Left specification
            right: Right specification
        """
        self.left = left
        self.right = right

    def to_sql_filter(self):
        """Convert to SQL AND filter."""
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())
