"""
Items API

A Lambda request handler mapping HTTP verbs behind API Gateway onto CRUD
operations against a single DynamoDB table, using boto3 and Pydantic.
"""

from .config import DynamoDBConfig
from .exceptions import (
    BadRequestError,
    ConfigurationError,
    ItemNotFoundError,
    ItemsApiError,
    StoreError,
)
from .models import (
    Item,
    ItemUpdate,
    GatewayRequest,
    GatewayResponse,
)
from .core import (
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    ItemsDispatcher,
    ItemsReadApi,
    ItemsWriteApi,
    create_dispatcher,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "BadRequestError",
    "ConfigurationError",
    "ItemNotFoundError",
    "ItemsApiError",
    "StoreError",

    # Models
    "Item",
    "ItemUpdate",
    "GatewayRequest",
    "GatewayResponse",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # CQRS APIs and dispatch
    "ItemsReadApi",
    "ItemsWriteApi",
    "ItemsDispatcher",
    "create_dispatcher",
]
