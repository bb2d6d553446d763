# Item models
from .item import (
    Item,
    ItemUpdate,
)

# API Gateway envelope
from .gateway import (
    GatewayRequest,
    GatewayResponse,
)

__all__ = [
    "Item",
    "ItemUpdate",
    "GatewayRequest",
    "GatewayResponse",
]
