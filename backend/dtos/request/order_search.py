"""
Order Request DTOs

DTOs for order search parameters.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from constants import OrderStatus


class OrderSearch(BaseModel):
    """
    Optional filters for the order search.

    An empty search matches every order.
    """

    member_name: Optional[str] = Field(None, description="Member name contains (case-sensitive)")
    order_status: Optional[OrderStatus] = Field(None, description="Filter by order status")

    @field_validator("member_name")
    @classmethod
    def blank_name_means_no_filter(cls, v):
        """Treat an empty or whitespace-only name as no filter."""
        if v is not None and not v.strip():
            return None
        return v

    def to_specification(self):
        """
        Build the combined specification for the active filters.

        Returns:
            Specification or None when no filter is set
        """
        from repositories.order_specifications import MemberNameSpecification, OrderStatusSpecification

        specs = []
        if self.order_status is not None:
            specs.append(OrderStatusSpecification(self.order_status))
        if self.member_name is not None:
            specs.append(MemberNameSpecification(self.member_name))

        if not specs:
            return None
        combined = specs[0]
        for spec in specs[1:]:
            combined = combined & spec
        return combined
