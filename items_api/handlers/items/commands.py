"""
Items Write API

Write operations on the items table. Create and update share a single
unconditional put: creating an existing id overwrites it and updating a
missing id creates it. Delete is idempotent.
"""

import logging

from ...codec import item_key, item_to_record, parse_item, parse_item_update
from ...core import TableGateway
from ...models import Item

logger = logging.getLogger(__name__)


class ItemsWriteApi:
    """Write-only API for item mutations."""

    def __init__(self, gateway: TableGateway):
        """Initialize write API with the shared table gateway."""
        self.gateway = gateway

    def put_item(self, item: Item) -> Item:
        """
        Store the full item, replacing any item with the same id.

        DynamoDB Operation: PutItem without ConditionExpression

        Returns:
            The item as stored
        """
        self.gateway.put_item(item_to_record(item))
        return item

    def create(self, body: str) -> Item:
        """
        Create (or overwrite) an item from a JSON body.

        Raises:
            BadRequestError: The body is not a JSON item
            StoreError: The put failed
        """
        item = parse_item(body)
        return self.put_item(item)

    def update(self, item_id: str, body: str) -> Item:
        """
        Replace the item at ``item_id`` with the JSON body.

        The body's own id is discarded; the stored item always has ``item_id``.

        Raises:
            BadRequestError: The body is not a JSON item update
            StoreError: The put failed
        """
        item = parse_item_update(body, item_id)
        return self.put_item(item)

    def delete(self, item_id: str) -> None:
        """
        Delete the item at ``item_id``; a missing item is not an error.

        DynamoDB Operation: DeleteItem

        Raises:
            StoreError: The delete failed
        """
        self.gateway.delete_item(item_key(item_id))
