"""
Remote data gateway backed by httpx.

Thin async wrapper over the collection-style REST store:
- RemoteGateway: owns the HTTP client and attaches the bearer token
- CollectionClient: list/get/find/create/update/delete for one collection

The gateway performs no retries and no caching. Every failure is raised
as RemoteRequestError for the calling store action to record.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from shoplist.shared.config import get_settings
from shoplist.shared.models import WireModel, Patch
from shoplist.shared.storage import ITokenStorage
from shoplist.modules.session.models import User
from shoplist.modules.shopping.models import ShoppingList, ShoppingItem, Category

from .exceptions import RemoteRequestError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=WireModel)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_message(response: httpx.Response) -> str:
    """Pick the most human-readable message a failed response offers."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value

    return f"Request failed with status code {response.status_code}"


class CollectionClient(Generic[T]):
    """
    CRUD access to one remote collection.

    Entities are decoded into the collection's pydantic model; a body that
    does not match the model is reported as a RemoteRequestError.
    """

    def __init__(self, gateway: "RemoteGateway", name: str, model: type[T]):
        self._gateway = gateway
        self._name = name
        self._model = model

    @property
    def name(self) -> str:
        return self._name

    def _path(self, entity_id: Optional[str] = None) -> str:
        if entity_id is None:
            return f"/{self._name}"
        return f"/{self._name}/{entity_id}"

    def _decode(self, data: Any, method: str, path: str) -> T:
        try:
            return self._model.model_validate(data)
        except PydanticValidationError as e:
            raise RemoteRequestError(
                f"Malformed {self._name} entity in response: {e.error_count()} invalid field(s)",
                method=method,
                path=path,
            ) from e

    def _decode_many(self, data: Any, method: str, path: str) -> list[T]:
        if not isinstance(data, list):
            raise RemoteRequestError(
                f"Expected a list of {self._name} in response",
                method=method,
                path=path,
            )
        return [self._decode(entry, method, path) for entry in data]

    async def list_all(self) -> list[T]:
        path = self._path()
        data = await self._gateway.request("GET", path)
        return self._decode_many(data, "GET", path)

    async def get(self, entity_id: str) -> T:
        path = self._path(entity_id)
        data = await self._gateway.request("GET", path)
        return self._decode(data, "GET", path)

    async def find(self, **filters: Any) -> list[T]:
        path = self._path()
        params = {to_camel(key): value for key, value in filters.items()}
        data = await self._gateway.request("GET", path, params=params)
        return self._decode_many(data, "GET", path)

    async def create(self, data: Union[WireModel, dict[str, Any]], **extra: Any) -> T:
        payload = data.to_wire() if isinstance(data, WireModel) else dict(data)
        payload.update({to_camel(key): value for key, value in extra.items()})

        now = _now_iso()
        payload.setdefault("id", uuid.uuid4().hex)
        payload["createdAt"] = now
        payload["updatedAt"] = now

        path = self._path()
        created = await self._gateway.request("POST", path, json=payload)
        return self._decode(created, "POST", path)

    async def update(self, entity_id: str, patch: Union[Patch, dict[str, Any]]) -> T:
        payload = patch.to_payload() if isinstance(patch, Patch) else dict(patch)
        payload["updatedAt"] = _now_iso()

        path = self._path(entity_id)
        updated = await self._gateway.request("PATCH", path, json=payload)
        return self._decode(updated, "PATCH", path)

    async def delete(self, entity_id: str) -> None:
        await self._gateway.request("DELETE", self._path(entity_id))


class RemoteGateway:
    """
    Entry point to the remote data store.

    The bearer token is read from token storage on every request, so a
    login or logout takes effect on the very next call.
    """

    def __init__(
        self,
        token_storage: ITokenStorage,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the gateway.

        Args:
            token_storage: Where the current bearer token lives.
            base_url: Store root URL. Defaults to settings.api_base_url.
            timeout: Per-request timeout in seconds. Defaults to settings.
            transport: Optional httpx transport (tests pass an ASGI or mock
                       transport here).
        """
        settings = get_settings()
        self._token_storage = token_storage
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

        self.users: CollectionClient[User] = CollectionClient(self, "users", User)
        self.shopping_lists: CollectionClient[ShoppingList] = CollectionClient(
            self, "shoppingLists", ShoppingList
        )
        self.shopping_items: CollectionClient[ShoppingItem] = CollectionClient(
            self, "shoppingItems", ShoppingItem
        )
        self.categories: CollectionClient[Category] = CollectionClient(
            self, "categories", Category
        )

    def _auth_headers(self) -> dict[str, str]:
        token = self._token_storage.get_token()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Issue one request and return the decoded JSON body.

        Returns None for empty bodies (e.g. a 204 from DELETE).

        Raises:
            RemoteRequestError: on transport failure, non-2xx status or a
                body that is not JSON.
        """
        logger.debug(f"{method} {path} params={params}")
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=json,
                headers=self._auth_headers(),
            )
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e!r}")
            raise RemoteRequestError(
                str(e) or "Network Error",
                method=method,
                path=path,
            ) from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise RemoteRequestError(
                message,
                method=method,
                path=path,
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RemoteRequestError(
                "Response body is not valid JSON",
                method=method,
                path=path,
                status_code=response.status_code,
            ) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RemoteGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
