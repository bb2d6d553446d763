"""
Items Read API

Read operations on the items table:
- get_by_id: GetItem by primary key
- list_all: full table Scan

Stored records are decoded through the item codec, so a record without the
item shape never reaches a response unchecked.
"""

import logging
from typing import List

from ...codec import item_key, record_to_item, try_record_to_item
from ...core import TableGateway
from ...exceptions import ItemNotFoundError
from ...models import Item

logger = logging.getLogger(__name__)


class ItemsReadApi:
    """Read-only API for item lookups."""

    def __init__(self, gateway: TableGateway):
        """Initialize read API with the shared table gateway."""
        self.gateway = gateway

    def get_by_id(self, item_id: str) -> Item:
        """
        Get one item by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            item_id: Item identifier

        Returns:
            The stored item

        Raises:
            ItemNotFoundError: No item has this id
            StoreError: The lookup failed or the stored record is malformed
        """
        key = item_key(item_id)
        record = self.gateway.get_item(key)
        if record is None:
            raise ItemNotFoundError(self.gateway.table_name, key)
        return record_to_item(record)

    def list_all(self) -> List[Item]:
        """
        List every item in the table.

        DynamoDB Operation: Scan (all pages)

        Malformed records are skipped; the remaining items keep scan order.

        Raises:
            StoreError: The scan failed
        """
        records = self.gateway.scan_all()
        items = []
        for record in records:
            item = try_record_to_item(record)
            if item is not None:
                items.append(item)

        skipped = len(records) - len(items)
        if skipped:
            logger.warning(f"Skipped {skipped} malformed record(s) while listing {self.gateway.table_name}")
        return items
