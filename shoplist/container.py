"""
Wiring for the client state layer.

This module provides the "container" that wires together one token
storage, one gateway, one session manager and the two stores. Each store
depends on interfaces, and this file picks the concrete implementations.

Hosts that want several independent sessions (tests, multi-account
tools) create their own ServiceContainer; get_container() is only a
convenience for hosts that need exactly one.
"""

from typing import Optional, TYPE_CHECKING

import httpx

from shoplist.shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shoplist.shared.storage import ITokenStorage
    from shoplist.modules.gateway.client import RemoteGateway
    from shoplist.modules.session.interfaces import ISessionManager
    from shoplist.modules.auth.store import AuthStore
    from shoplist.modules.shopping.store import ShoppingStore


class ServiceContainer:
    """
    Container for one session's object graph.

    Services are created lazily on first access and cached for the
    lifetime of the container. Call aclose() to release the HTTP client.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_storage: "ITokenStorage | None" = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            settings: Defaults to get_settings()
            token_storage: Defaults to a FileTokenStorage at the configured path
            transport: Optional httpx transport handed to the gateway
        """
        self._settings = settings or get_settings()
        self._transport = transport
        self._token_storage: "ITokenStorage | None" = token_storage
        self._gateway: "RemoteGateway | None" = None
        self._session: "ISessionManager | None" = None
        self._auth: "AuthStore | None" = None
        self._shopping: "ShoppingStore | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def token_storage(self) -> "ITokenStorage":
        """Get the token storage instance."""
        if self._token_storage is None:
            from shoplist.shared.storage import FileTokenStorage
            self._token_storage = FileTokenStorage(
                path=self._settings.token_storage_path,
                key=self._settings.token_storage_key,
            )
        return self._token_storage

    @property
    def gateway(self) -> "RemoteGateway":
        """Get the remote gateway instance."""
        if self._gateway is None:
            from shoplist.modules.gateway.client import RemoteGateway
            self._gateway = RemoteGateway(
                self.token_storage,
                base_url=self._settings.api_base_url,
                timeout=self._settings.request_timeout,
                transport=self._transport,
            )
        return self._gateway

    @property
    def session(self) -> "ISessionManager":
        """Get the session manager instance."""
        if self._session is None:
            from shoplist.modules.session.service import SessionManager
            self._session = SessionManager(
                users=self.gateway.users,
                token_storage=self.token_storage,
                settings=self._settings,
            )
        return self._session

    @property
    def auth(self) -> "AuthStore":
        """Get the auth state store."""
        if self._auth is None:
            from shoplist.modules.auth.store import AuthStore
            self._auth = AuthStore(self.session)
        return self._auth

    @property
    def shopping(self) -> "ShoppingStore":
        """Get the shopping state store."""
        if self._shopping is None:
            from shoplist.modules.shopping.store import ShoppingStore
            self._shopping = ShoppingStore(
                lists=self.gateway.shopping_lists,
                items=self.gateway.shopping_items,
                categories=self.gateway.categories,
                session=self.session,
            )
        return self._shopping

    async def aclose(self) -> None:
        """Close the gateway's HTTP client if one was created."""
        if self._gateway is not None:
            await self._gateway.aclose()

    async def reset(self) -> None:
        """
        Drop all cached services.

        The token storage passed in by the caller is kept, so a fresh graph
        picks up the same session.
        """
        await self.aclose()
        self._gateway = None
        self._session = None
        self._auth = None
        self._shopping = None

    async def __aenter__(self) -> "ServiceContainer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances. The old
    container's HTTP client is not closed; callers that opened one should
    await its aclose() first.

    Primarily used for testing.
    """
    global _container
    _container = None
