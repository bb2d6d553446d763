"""
Handler Layer for the Items API

handlers/ (this layer) -> core/ (TableGateway) -> DynamoDB
handlers/ (this layer) <- models/ + codec

- items/: CQRS read (queries.py) and write (commands.py) APIs
- dispatcher.py: routes gateway requests onto those APIs
"""

from .items import ItemsReadApi, ItemsWriteApi
from .dispatcher import ItemsDispatcher, create_dispatcher

__all__ = [
    'ItemsReadApi',
    'ItemsWriteApi',
    'ItemsDispatcher',
    'create_dispatcher',
]
