"""
Session manager implementation.

Derives a user identity from the stored bearer token and implements
register/login/restore/update-profile/logout on top of the remote users
collection.

Login looks the user up by email only. Unless settings.verify_passwords is
enabled, the supplied password is not checked against the stored hash;
that matches the behavior existing deployments rely on and must be turned
on before this is used anywhere real.
"""

import logging
from typing import Optional, TYPE_CHECKING

from shoplist.shared.config import Settings, get_settings
from shoplist.shared.exceptions import ShoplistError
from shoplist.shared.storage import ITokenStorage

from .models import (
    LoginResult,
    User,
    UserLogin,
    UserProfile,
    UserRegistration,
    UserUpdate,
)
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    NoTokenError,
    NotAuthenticatedError,
    RegistrationError,
    SessionRestoreError,
)
from .passwords import hash_password, verify_password
from .token import SessionToken

if TYPE_CHECKING:
    from shoplist.modules.gateway.interfaces import ICollectionClient

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Implementation of ISessionManager.

    Holds no session state of its own: the token in storage is the only
    source of truth, read on every call.
    """

    def __init__(
        self,
        users: "ICollectionClient[User]",
        token_storage: ITokenStorage,
        settings: Optional[Settings] = None,
    ):
        self._users = users
        self._storage = token_storage
        self._settings = settings or get_settings()

    def _hash(self, password: str) -> str:
        return hash_password(password, rounds=self._settings.password_hash_rounds)

    async def register(self, registration: UserRegistration) -> LoginResult:
        """Hash the password, create the user, then log in with the plaintext."""
        payload = registration.to_wire()
        payload["password"] = self._hash(registration.password)

        try:
            created = await self._users.create(payload)
        except ShoplistError as e:
            self._storage.remove_token()
            raise RegistrationError(e.message or "Registration failed") from e

        logger.info(f"Registered user {created.id}")
        return await self.login(
            UserLogin(email=registration.email, password=registration.password)
        )

    async def login(self, credentials: UserLogin) -> LoginResult:
        """
        Find the user by email (first match wins) and issue a token.

        A failed attempt also drops any previously stored token, so the
        gateway never keeps acting for the earlier user.
        """
        try:
            user = await self._authenticate(credentials)
        except ShoplistError:
            self._storage.remove_token()
            raise

        token = SessionToken.issue(user.id).encode()
        self._storage.set_token(token)
        logger.info(f"User {user.id} logged in")

        return LoginResult(user=user.to_profile(), token=token)

    async def restore_session(self) -> LoginResult:
        """Load the profile of the user the stored token speaks for."""
        raw = self._storage.get_token()
        if not raw:
            raise NoTokenError()

        try:
            token = SessionToken.decode(raw)
        except InvalidTokenError:
            self._storage.remove_token()
            raise

        try:
            user = await self._users.get(token.subject)
        except ShoplistError as e:
            self._storage.remove_token()
            logger.warning(f"Dropping stored token for {token.subject}: {e.message}")
            raise SessionRestoreError(e.message or "Failed to load user") from e

        return LoginResult(user=user.to_profile(), token=raw)

    async def update_profile(
        self,
        updates: UserUpdate,
        user_id: Optional[str] = None,
    ) -> UserProfile:
        """Send only the changed fields, hashing a new password first."""
        user_id = user_id or self.current_user_id()
        if not user_id:
            raise NotAuthenticatedError()

        payload = updates.to_payload()
        if payload.get("password"):
            payload["password"] = self._hash(payload["password"])

        updated = await self._users.update(user_id, payload)
        return updated.to_profile()

    async def _authenticate(self, credentials: UserLogin) -> User:
        matches = await self._users.find(email=credentials.email)
        if not matches:
            raise InvalidCredentialsError()

        user = matches[0]
        if self._settings.verify_passwords and not verify_password(
            credentials.password, user.password
        ):
            raise InvalidCredentialsError()
        return user

    def logout(self) -> None:
        self._storage.remove_token()

    def stored_token(self) -> Optional[str]:
        return self._storage.get_token()

    def current_user_id(self) -> Optional[str]:
        raw = self._storage.get_token()
        if not raw:
            return None
        try:
            return SessionToken.decode(raw).subject
        except InvalidTokenError:
            return None
