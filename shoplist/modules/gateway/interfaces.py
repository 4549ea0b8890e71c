"""
Gateway module interface.

Stores and the session manager depend on ICollectionClient, not on httpx.
This keeps them testable with AsyncMock collections.
"""

from typing import Any, Protocol, TypeVar, Union, runtime_checkable

from shoplist.shared.models import WireModel, Patch

T_co = TypeVar("T_co", bound=WireModel, covariant=True)


@runtime_checkable
class ICollectionClient(Protocol[T_co]):
    """
    CRUD access to one remote collection.

    Every call may raise RemoteRequestError; none of them retry.
    """

    async def list_all(self) -> list[T_co]:
        """Fetch every entity in the collection."""
        ...

    async def get(self, entity_id: str) -> T_co:
        """Fetch one entity by id."""
        ...

    async def find(self, **filters: Any) -> list[T_co]:
        """
        Fetch entities whose fields equal the given values.

        Args:
            **filters: snake_case field names mapped to required values,
                       e.g. find(list_id="42").
        """
        ...

    async def create(self, data: Union[WireModel, dict[str, Any]], **extra: Any) -> T_co:
        """
        Create an entity.

        A client-generated id and createdAt/updatedAt stamps are added;
        extra keyword fields are merged into the payload.
        """
        ...

    async def update(self, entity_id: str, patch: Union[Patch, dict[str, Any]]) -> T_co:
        """Apply a partial update and return the stored entity."""
        ...

    async def delete(self, entity_id: str) -> None:
        """Delete an entity by id."""
        ...
