"""
Shared data model bases used across modules.

The remote store speaks camelCase JSON; Python code uses snake_case
attributes. WireModel bridges the two with pydantic aliases.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for every entity exchanged with the remote store.

    Accepts both camelCase (wire) and snake_case (Python) field names
    and ignores unknown fields returned by the server.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape the store expects."""
        return self.model_dump(mode="json", by_alias=True)


class Patch(WireModel):
    """
    Partial update of an entity.

    Every field on a patch is optional; only fields the caller actually
    set are transmitted, so an untouched field is never overwritten.
    """

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly provided."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
