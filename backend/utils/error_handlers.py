"""
Error handling decorators for API endpoints.

Centralizes the translation of application and database exceptions into
HTTPException responses so every order endpoint fails the same way.
"""

import inspect
import logging
from functools import wraps
from typing import Callable
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from constants import HTTPStatus
from exceptions import ValidationError, DatabaseError, ApplicationError

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """Log `error` and build the HTTPException it maps to."""
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)

    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )

    if isinstance(error, SQLAlchemyError):
        logger.error(f"{operation_name} - Database error: {error}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail="Database operation failed"
        )

    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Order listing v2")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/v5/orders")
        @handle_api_errors("Order listing v5")
        def orders_v5(...):
            return repository.find_all_by_dto_optimization()
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
