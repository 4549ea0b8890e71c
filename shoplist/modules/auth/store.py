"""
Auth state store.

Holds the session entity and applies the lifecycle outcomes of the session
manager's operations. Every action returns an ActionResult and never
raises; failures end up in AuthState.error.
"""

import logging

from shoplist.shared.actions import ActionResult, ActionStore
from shoplist.modules.session.interfaces import ISessionManager
from shoplist.modules.session.models import (
    LoginResult,
    UserLogin,
    UserProfile,
    UserRegistration,
    UserUpdate,
)
from shoplist.modules.session.exceptions import NotAuthenticatedError

from .models import AuthState, AuthStatus

logger = logging.getLogger(__name__)


class AuthStore(ActionStore):
    """
    Session state machine: idle -> pending -> authenticated | unauthenticated.

    register, login and restore_session share one failure contract: the
    state drops to unauthenticated with user and token cleared, and the
    stored token is forgotten. A failed
    update_profile only records the error and leaves the session alone.
    """

    name = "auth"

    def __init__(self, session: ISessionManager):
        self._session = session
        self._state = AuthState(token=session.stored_token())

    @property
    def state(self) -> AuthState:
        return self._state

    # -------------------------------------------------------------------------
    # Lifecycle apply steps
    # -------------------------------------------------------------------------

    def _apply_pending(self, action: str) -> None:
        self._state.loading = True
        self._state.error = None
        self._state.status = AuthStatus.PENDING

    def _apply_rejected(self, action: str, message: str) -> None:
        # Storage must agree with the signed-out state
        self._session.logout()
        self._state.loading = False
        self._state.error = message
        self._state.user = None
        self._state.token = None
        self._state.status = AuthStatus.UNAUTHENTICATED

    def _apply_session(self, result: LoginResult) -> None:
        self._state.loading = False
        self._state.user = result.user
        self._state.token = result.token
        self._state.error = None
        self._state.status = AuthStatus.AUTHENTICATED

    def _apply_profile(self, profile: UserProfile) -> None:
        self._state.loading = False
        self._state.user = profile
        self._state.error = None
        self._state.status = AuthStatus.AUTHENTICATED

    def _apply_profile_rejected(self, message: str) -> None:
        self._state.loading = False
        self._state.error = message
        self._state.status = (
            AuthStatus.AUTHENTICATED
            if self._state.is_authenticated
            else AuthStatus.UNAUTHENTICATED
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def register(self, registration: UserRegistration) -> ActionResult[LoginResult]:
        return await self._dispatch(
            "register",
            lambda: self._session.register(registration),
            self._apply_session,
            fallback_message="Registration failed",
        )

    async def login(self, credentials: UserLogin) -> ActionResult[LoginResult]:
        return await self._dispatch(
            "login",
            lambda: self._session.login(credentials),
            self._apply_session,
            fallback_message="Login failed",
        )

    async def restore_session(self) -> ActionResult[LoginResult]:
        return await self._dispatch(
            "loadFromToken",
            self._session.restore_session,
            self._apply_session,
            fallback_message="Failed to load user",
        )

    async def update_profile(self, updates: UserUpdate) -> ActionResult[UserProfile]:
        async def operation() -> UserProfile:
            user = self._state.user
            if user is None:
                raise NotAuthenticatedError()
            return await self._session.update_profile(updates, user_id=user.id)

        return await self._dispatch(
            "updateProfile",
            operation,
            self._apply_profile,
            fallback_message="Profile update failed",
            on_rejected=self._apply_profile_rejected,
        )

    def logout(self) -> None:
        """Forget the token and return to the initial signed-out state."""
        self._session.logout()
        self._state = AuthState(status=AuthStatus.UNAUTHENTICATED)
        logger.info("Logged out")

    def clear_error(self) -> None:
        self._state.error = None

    def set_loading(self, loading: bool) -> None:
        self._state.loading = loading
