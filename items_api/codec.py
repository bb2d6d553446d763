"""
Item Codec

Translation between the three shapes an item takes:

- wire JSON (``{"id": "...", "name": "..."}``) sent and received over HTTP
- the ``Item`` model used inside the handler
- the DynamoDB item map stored in the table

Decoding wire input raises ``BadRequestError`` carrying the parser's own
message; absent or null fields in a body become empty strings. Decoding
stored records is stricter and fallible: ``record_to_item`` raises
``StoreError`` and ``try_record_to_item`` returns ``None`` so a scan can skip
records that do not have the item shape.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import BadRequestError, StoreError
from .models import Item, ItemUpdate

logger = logging.getLogger(__name__)

_item_list_adapter = TypeAdapter(List[Item])


# =============================================================================
# Wire JSON <-> Item
# =============================================================================

def parse_item(body: str) -> Item:
    """Decode a create body into an item.

    Args:
        body: Raw JSON request body

    Returns:
        Item; absent or null fields are empty strings

    Raises:
        BadRequestError: If the body is not a JSON object or a field is not a string
    """
    try:
        return Item.model_validate_json(body)
    except PydanticValidationError as e:
        raise BadRequestError(str(e), errors=e.errors(include_url=False), original_error=e) from e


def parse_item_update(body: str, item_id: str) -> Item:
    """Decode an update body and key it by the path id.

    Any ``id`` in the body is discarded in favour of ``item_id``.

    Raises:
        BadRequestError: If the body is not a JSON object or ``name`` is not a string
    """
    try:
        update = ItemUpdate.model_validate_json(body)
    except PydanticValidationError as e:
        raise BadRequestError(str(e), errors=e.errors(include_url=False), original_error=e) from e
    return update.to_item(item_id)


def dump_item(item: Item) -> str:
    """Serialize an item to compact wire JSON."""
    return item.model_dump_json()


def dump_items(items: List[Item]) -> str:
    """Serialize items to a compact JSON array (``[]`` when empty)."""
    return _item_list_adapter.dump_json(items).decode('utf-8')


# =============================================================================
# Item <-> DynamoDB item map
# =============================================================================

def item_to_record(item: Item) -> Dict[str, Any]:
    """Convert an item to the DynamoDB item map written by PutItem."""
    return item.model_dump()


def item_key(item_id: str) -> Dict[str, Any]:
    """Primary key map for GetItem/DeleteItem."""
    return {'id': item_id}


def record_to_item(record: Dict[str, Any]) -> Item:
    """Convert a stored DynamoDB record to an item.

    Unlike request bodies, a stored record must carry both attributes.

    Raises:
        StoreError: If the record is missing ``id``/``name`` or either is not a string
    """
    missing = [field for field in Item.model_fields if record.get(field) is None]
    if missing:
        raise StoreError(f"Malformed item record: missing attribute(s) {missing}")
    try:
        return Item.model_validate(record)
    except PydanticValidationError as e:
        raise StoreError(f"Malformed item record: {e}", original_error=e) from e


def try_record_to_item(record: Dict[str, Any]) -> Optional[Item]:
    """Convert a stored record to an item, or return None if it is malformed."""
    try:
        return record_to_item(record)
    except StoreError as e:
        logger.warning(f"Skipping malformed record {record.get('id', '<no id>')!r}: {e.message}")
        return None
