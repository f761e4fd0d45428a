"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class NotEnoughStockError(ApplicationError):
    """Raised when an order asks for more units than an item has in stock"""

    def __init__(self, item_name: str, available: int, requested: int):
        details = {"item_name": item_name, "available": available, "requested": requested}
        super().__init__(f"Not enough stock for '{item_name}': {available} available, {requested} requested",
                         details)


class OrderCancellationError(ApplicationError):
    """Raised when an order can no longer be cancelled"""

    def __init__(self, order_id: int | None, message: str):
        details = {"order_id": order_id}
        super().__init__(message, details)
