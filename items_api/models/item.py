"""
Item Models

The single persisted entity of the API. Both models are strict about types:
a JSON number is not accepted where a string is expected. Missing or null
fields decode as the empty string, a null body as an empty object, and
unknown fields are ignored.

- Item: the full record, used for create bodies, responses and stored records
- ItemUpdate: the update body, whose id is accepted and then discarded
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Item(BaseModel):
    """An item keyed by ``id``."""

    model_config = ConfigDict(strict=True, extra='ignore')

    id: str = Field(default="", description="Primary key, supplied by the client")
    name: str = Field(default="", description="Free-text name")

    @model_validator(mode='before')
    @classmethod
    def null_as_empty_object(cls, data):
        return {} if data is None else data

    @field_validator('id', 'name', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        """Decode JSON null as the empty string."""
        return "" if v is None else v


class ItemUpdate(BaseModel):
    """
    Body of a full-replacement update.

    The path id always wins, so ``id`` here is only tolerated for
    compatibility with clients that send the whole item back.
    """

    model_config = ConfigDict(strict=True, extra='ignore')

    id: Optional[str] = Field(None, description="Ignored; replaced by the path id")
    name: str = Field(default="", description="New name, overwrites the stored one")

    @model_validator(mode='before')
    @classmethod
    def null_as_empty_object(cls, data):
        return {} if data is None else data

    @field_validator('name', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    def to_item(self, item_id: str) -> Item:
        """Build the item to store under ``item_id``."""
        return Item(id=item_id, name=self.name)
