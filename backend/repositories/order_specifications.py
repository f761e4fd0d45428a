"""
Order-specific Specifications

Concrete specifications for searching orders. Specifications that reference
member columns require the query to join Order.member.
"""

from models import Order, Member
from .specifications import Specification


class OrderStatusSpecification(Specification[Order]):
    """Specification for orders in a specific status."""

    def __init__(self, status):
        """
        Initialize specification.

        Args:
            status: OrderStatus to filter by
        """
        self.status = status

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Order.status == self.status


class MemberNameSpecification(Specification[Order]):
    """Specification for orders placed by members whose name contains a fragment."""

    def __init__(self, name: str):
        """
        Initialize specification.

        Args:
            name: Fragment of the member name; LIKE wildcards match literally
        """
        self.name = name

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Member.name.contains(self.name, autoescape=True)
