"""Tests for order specifications rendered as SQL filters."""

from constants import OrderStatus
from dtos.request.order_search import OrderSearch
from repositories.order_repository import OrderRepository
from repositories.order_specifications import MemberNameSpecification, OrderStatusSpecification


def _member_names(session, spec):
    return [order.member.name for order in OrderRepository(session).find(spec)]


class TestSpecifications:
    def test_status(self, seeded_session):
        assert _member_names(seeded_session, OrderStatusSpecification(OrderStatus.ORDER)) == ["userA", "userB"]
        assert _member_names(seeded_session, OrderStatusSpecification(OrderStatus.CANCEL)) == []

    def test_member_name_contains(self, seeded_session):
        assert _member_names(seeded_session, MemberNameSpecification("serA")) == ["userA"]

    def test_like_wildcards_are_literal(self, seeded_session):
        assert _member_names(seeded_session, MemberNameSpecification("user%")) == []

    def test_and_composition(self, seeded_session):
        placed_by_b = MemberNameSpecification("userB") & OrderStatusSpecification(OrderStatus.ORDER)
        cancelled_by_b = MemberNameSpecification("userB") & OrderStatusSpecification(OrderStatus.CANCEL)

        assert _member_names(seeded_session, placed_by_b) == ["userB"]
        assert _member_names(seeded_session, cancelled_by_b) == []


class TestOrderSearch:
    def test_empty_search_has_no_specification(self):
        assert OrderSearch().to_specification() is None

    def test_single_filter_is_used_directly(self):
        spec = OrderSearch(order_status=OrderStatus.ORDER).to_specification()

        assert isinstance(spec, OrderStatusSpecification)

    def test_combined_specification(self, seeded_session):
        spec = OrderSearch(member_name="userA", order_status=OrderStatus.ORDER).to_specification()

        assert _member_names(seeded_session, spec) == ["userA"]
