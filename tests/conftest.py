"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
most importantly an in-process fake of the remote data store. The fake
behaves like a json-server style REST store (collections, equality
filters on query parameters, PATCH merges) and is reached through
httpx.ASGITransport, so no sockets are opened.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from shoplist.shared.config import Settings, get_settings
from shoplist.shared.storage import MemoryTokenStorage
from shoplist.modules.gateway.client import RemoteGateway
from shoplist.modules.session.service import SessionManager

TEST_BASE_URL = "http://testserver"

DEFAULT_CATEGORIES = [
    {"id": "1", "name": "Dairy", "color": "#f0e68c"},
    {"id": "2", "name": "Produce", "color": "#90ee90"},
    {"id": "3", "name": "Bakery", "color": "#deb887"},
]


@dataclass
class RecordedRequest:
    method: str
    path: str
    authorization: Optional[str]
    query: dict[str, str]


class FakeRemoteStore:
    """In-memory REST store with request recording and failure injection."""

    def __init__(self) -> None:
        self.collections: dict[str, list[dict[str, Any]]] = {
            "users": [],
            "shoppingLists": [],
            "shoppingItems": [],
            "categories": [dict(c) for c in DEFAULT_CATEGORIES],
        }
        self.requests: list[RecordedRequest] = []
        self._failures: dict[tuple[str, str], tuple[int, Any]] = {}
        self.app = self._build_app()

    # -- test helpers ---------------------------------------------------------

    def fail(
        self,
        method: str,
        path: str,
        status_code: int = 500,
        body: Any = None,
    ) -> None:
        """Make every request matching method and path fail."""
        if body is None:
            body = {"message": "Internal Server Error"}
        self._failures[(method.upper(), path)] = (status_code, body)

    def recover(self, method: str, path: str) -> None:
        """Stop failing requests matching method and path."""
        self._failures.pop((method.upper(), path), None)

    def requests_to(self, method: str, path_prefix: str) -> list[RecordedRequest]:
        return [
            r for r in self.requests
            if r.method == method and r.path.startswith(path_prefix)
        ]

    def add(self, collection: str, **fields: Any) -> dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        entity = {"id": uuid.uuid4().hex, "createdAt": now, "updatedAt": now, **fields}
        self.collections[collection].append(entity)
        return entity

    def add_user(self, **fields: Any) -> dict[str, Any]:
        defaults = {
            "email": "jane@example.com",
            "password": "",
            "firstName": "Jane",
            "lastName": "Doe",
            "cellPhone": "555-123-4567",
        }
        return self.add("users", **{**defaults, **fields})

    def add_list(self, user_id: str, **fields: Any) -> dict[str, Any]:
        defaults = {"name": "Groceries", "description": "", "sharedWith": []}
        return self.add("shoppingLists", userId=user_id, **{**defaults, **fields})

    def add_item(self, list_id: str, **fields: Any) -> dict[str, Any]:
        defaults = {
            "name": "Milk",
            "quantity": 1,
            "category": "Dairy",
            "notes": "",
            "imageUrl": "",
            "completed": False,
        }
        return self.add("shoppingItems", listId=list_id, **{**defaults, **fields})

    def find(self, collection: str, entity_id: str) -> Optional[dict[str, Any]]:
        return next(
            (e for e in self.collections[collection] if e["id"] == entity_id),
            None,
        )

    # -- ASGI app -------------------------------------------------------------

    def _collection(self, name: str) -> list[dict[str, Any]]:
        if name not in self.collections:
            raise HTTPException(status_code=404, detail=f"Unknown collection {name}")
        return self.collections[name]

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.middleware("http")
        async def record_and_inject(request: Request, call_next):
            self.requests.append(
                RecordedRequest(
                    method=request.method,
                    path=request.url.path,
                    authorization=request.headers.get("authorization"),
                    query=dict(request.query_params),
                )
            )
            failure = self._failures.get((request.method, request.url.path))
            if failure is not None:
                status_code, body = failure
                return JSONResponse(body, status_code=status_code)
            return await call_next(request)

        @app.get("/{collection}")
        async def list_entities(collection: str, request: Request):
            entities = self._collection(collection)
            filters = dict(request.query_params)
            return [
                e for e in entities
                if all(str(e.get(key)) == value for key, value in filters.items())
            ]

        @app.get("/{collection}/{entity_id}")
        async def get_entity(collection: str, entity_id: str):
            self._collection(collection)
            entity = self.find(collection, entity_id)
            if entity is None:
                raise HTTPException(status_code=404, detail="Not Found")
            return entity

        @app.post("/{collection}")
        async def create_entity(collection: str, request: Request):
            entities = self._collection(collection)
            body = await request.json()
            if "id" not in body:
                body["id"] = uuid.uuid4().hex
            if self.find(collection, body["id"]) is not None:
                raise HTTPException(status_code=409, detail="Duplicate id")
            entities.append(body)
            return JSONResponse(body, status_code=201)

        @app.patch("/{collection}/{entity_id}")
        async def patch_entity(collection: str, entity_id: str, request: Request):
            self._collection(collection)
            entity = self.find(collection, entity_id)
            if entity is None:
                raise HTTPException(status_code=404, detail="Not Found")
            entity.update(await request.json())
            return entity

        @app.delete("/{collection}/{entity_id}")
        async def delete_entity(collection: str, entity_id: str):
            entities = self._collection(collection)
            entity = self.find(collection, entity_id)
            if entity is None:
                raise HTTPException(status_code=404, detail="Not Found")
            entities.remove(entity)
            return {}

        return app


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch, tmp_path):
    """Keep settings isolated from the developer's environment and home dir."""
    monkeypatch.setenv("SHOPLIST_TOKEN_STORAGE_PATH", str(tmp_path / "session.json"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with cheap bcrypt rounds."""
    return Settings(password_hash_rounds=4)


@pytest.fixture
def remote_store() -> FakeRemoteStore:
    return FakeRemoteStore()


@pytest.fixture
def token_storage() -> MemoryTokenStorage:
    return MemoryTokenStorage()


@pytest.fixture
def transport(remote_store: FakeRemoteStore) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=remote_store.app)


@pytest.fixture
def gateway(transport, token_storage) -> RemoteGateway:
    """Gateway wired to the fake remote store."""
    return RemoteGateway(token_storage, base_url=TEST_BASE_URL, transport=transport)


@pytest.fixture
def session(gateway, token_storage, settings) -> SessionManager:
    return SessionManager(gateway.users, token_storage, settings=settings)
