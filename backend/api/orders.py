"""
Order listing endpoints.

Each version returns the same orders while loading them differently:
- v2: entities with lazy associations (1 + N + M statements)
- v3: one fetch-join SELECT over every association
- v3.1: paged, to-one associations joined, collections batch loaded
- v4: DTO projection, items loaded per order (1 + N)
- v5: DTO projection, items loaded with one IN query (1 + 1)
- v6: one flat join, grouped into orders in memory
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from constants import Pagination
from dependencies import get_order_repository, get_order_query_repository
from dtos.request.order_search import OrderSearch
from dtos.response.order_response import OrderDto
from dtos.response.order_query_response import OrderQueryDto
from dtos.internal.order_flat_dto import group_flat_rows
from repositories.order_repository import OrderRepository
from repositories.order_query_repository import OrderQueryRepository
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/v2/orders", response_model=List[OrderDto])
@handle_api_errors("Order listing v2")
def orders_v2(repository: OrderRepository = Depends(get_order_repository)):
    """Entities mapped to DTOs; every association is lazy loaded."""
    orders = repository.find_all_by_search(OrderSearch())
    return [OrderDto.from_entity(order) for order in orders]


@router.get("/v3/orders", response_model=List[OrderDto])
@handle_api_errors("Order listing v3")
def orders_v3(repository: OrderRepository = Depends(get_order_repository)):
    """Entities fetched with a single join over member, delivery and items."""
    orders = repository.find_all_with_item()
    return [OrderDto.from_entity(order) for order in orders]


@router.get("/v3.1/orders", response_model=List[OrderDto])
@handle_api_errors("Order listing v3.1")
def orders_v3_page(
    offset: int = Query(Pagination.DEFAULT_OFFSET, ge=0),
    limit: int = Query(Pagination.DEFAULT_LIMIT, ge=1, le=Pagination.MAX_LIMIT),
    repository: OrderRepository = Depends(get_order_repository)
):
    """Paged entities; member/delivery joined, items loaded in batches."""
    orders = repository.find_all_with_member_delivery(offset=offset, limit=limit)
    return [OrderDto.from_entity(order) for order in orders]


@router.get("/v4/orders", response_model=List[OrderQueryDto])
@handle_api_errors("Order listing v4")
def orders_v4(repository: OrderQueryRepository = Depends(get_order_query_repository)):
    return repository.find_order_query_dtos()


@router.get("/v5/orders", response_model=List[OrderQueryDto])
@handle_api_errors("Order listing v5")
def orders_v5(repository: OrderQueryRepository = Depends(get_order_query_repository)):
    return repository.find_all_by_dto_optimization()


@router.get("/v6/orders", response_model=List[OrderQueryDto])
@handle_api_errors("Order listing v6")
def orders_v6(repository: OrderQueryRepository = Depends(get_order_query_repository)):
    """Single flat join, folded into one entry per order."""
    return group_flat_rows(repository.find_all_by_dto_flat())
