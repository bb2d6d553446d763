"""
Items CQRS APIs

Read API (queries.py):
- GetItem by id, full-table Scan

Write API (commands.py):
- Unconditional PutItem shared by create and update
- Idempotent DeleteItem

Usage:
    gateway = create_table_gateway(config)
    read_api = ItemsReadApi(gateway)
    write_api = ItemsWriteApi(gateway)
"""

from .queries import ItemsReadApi
from .commands import ItemsWriteApi

__all__ = [
    "ItemsReadApi",
    "ItemsWriteApi",
]
