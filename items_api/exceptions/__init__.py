# Base exception class
from .base import ItemsApiError

# Domain-specific exceptions
from .domain_exceptions import (
    BadRequestError,
    ConfigurationError,
    ItemNotFoundError,
    StoreError,
)

__all__ = [
    # Base exception
    "ItemsApiError",

    # Domain exceptions (alphabetically ordered)
    "BadRequestError",
    "ConfigurationError",
    "ItemNotFoundError",
    "StoreError",
]
