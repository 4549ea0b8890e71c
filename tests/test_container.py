"""Tests for container.py."""

import pytest

from shoplist.container import ServiceContainer, get_container, reset_container
from shoplist.shared.storage import FileTokenStorage, MemoryTokenStorage
from shoplist.modules.session.models import UserLogin
from shoplist.modules.auth.store import AuthStore
from shoplist.modules.shopping.store import ShoppingStore


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the container singleton before and after each test."""
    reset_container()
    yield
    reset_container()


class TestServiceContainer:
    def test_services_are_cached(self, settings):
        container = ServiceContainer(settings=settings, token_storage=MemoryTokenStorage())

        assert isinstance(container.auth, AuthStore)
        assert isinstance(container.shopping, ShoppingStore)
        assert container.auth is container.auth
        assert container.shopping is container.shopping
        assert container.gateway is container.gateway

    def test_default_token_storage_is_file_backed(self, settings, tmp_path):
        container = ServiceContainer(settings=settings)

        storage = container.token_storage
        assert isinstance(storage, FileTokenStorage)
        assert storage.path == tmp_path / "session.json"

    def test_containers_are_independent(self, settings):
        first = ServiceContainer(settings=settings, token_storage=MemoryTokenStorage())
        second = ServiceContainer(settings=settings, token_storage=MemoryTokenStorage())

        assert first.auth is not second.auth
        assert first.token_storage is not second.token_storage

    @pytest.mark.asyncio
    async def test_reset_rebuilds_graph(self, settings):
        storage = MemoryTokenStorage()
        container = ServiceContainer(settings=settings, token_storage=storage)
        auth = container.auth

        await container.reset()

        assert container.auth is not auth
        assert container.token_storage is storage

    @pytest.mark.asyncio
    async def test_shares_session_across_stores(self, settings, transport, remote_store):
        """Logging in through auth should authorize shopping calls."""
        remote_store.add_user(email="jane@example.com")
        async with ServiceContainer(
            settings=settings,
            token_storage=MemoryTokenStorage(),
            transport=transport,
        ) as container:
            await container.auth.login(UserLogin(email="jane@example.com", password="x"))
            result = await container.shopping.fetch_lists()

        assert result.ok
        assert remote_store.requests[-1].authorization == f"Bearer {container.auth.state.token}"


class TestGetContainer:
    def test_singleton(self):
        assert get_container() is get_container()

    def test_reset(self):
        first = get_container()
        reset_container()
        assert get_container() is not first
