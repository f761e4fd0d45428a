"""
Application-wide constants.

This module centralizes the magic strings and numbers used by the order API
so repositories, DTOs and routers agree on them.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle of an order."""

    ORDER = 'ORDER'    # Placed
    CANCEL = 'CANCEL'  # Cancelled, stock returned


class DeliveryStatus(str, Enum):
    """Lifecycle of a delivery."""

    READY = 'READY'  # Awaiting shipment, order can still be cancelled
    COMP = 'COMP'    # Completed, order can no longer be cancelled


class ItemType:
    """Discriminator values for the single-table item hierarchy"""

    BOOK = 'B'
    ALBUM = 'A'
    MOVIE = 'M'


class Pagination:
    """Paging defaults for order listings"""

    DEFAULT_OFFSET = 0
    DEFAULT_LIMIT = 100
    MAX_LIMIT = 1000

    # Hard cap for the unpaged search query
    SEARCH_MAX_RESULTS = 1000


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8080

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class Headers:
    """Custom response headers"""

    QUERY_COUNT = "X-Query-Count"
