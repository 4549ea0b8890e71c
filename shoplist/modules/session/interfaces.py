"""
Session module interface.

The auth and shopping stores depend on ISessionManager, not the concrete
implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    LoginResult,
    UserLogin,
    UserProfile,
    UserRegistration,
    UserUpdate,
)


@runtime_checkable
class ISessionManager(Protocol):
    """
    Interface for session operations.

    Implementations derive the user identity from the stored bearer token
    and talk to the remote users collection.
    """

    async def register(self, registration: UserRegistration) -> LoginResult:
        """
        Create a user and log them in.

        Raises:
            RegistrationError: If the remote store refuses the new user
            InvalidCredentialsError: If the follow-up login finds no user
        """
        ...

    async def login(self, credentials: UserLogin) -> LoginResult:
        """
        Look up the user by email and issue a token.

        Raises:
            InvalidCredentialsError: If no user has that email
        """
        ...

    async def restore_session(self) -> LoginResult:
        """
        Rebuild the session from the stored token.

        Raises:
            NoTokenError: If no token is stored
            InvalidTokenError: If the stored token cannot be parsed
            SessionRestoreError: If the profile cannot be fetched
        """
        ...

    async def update_profile(
        self,
        updates: UserUpdate,
        user_id: Optional[str] = None,
    ) -> UserProfile:
        """
        Apply a partial update to the user's profile.

        Raises:
            NotAuthenticatedError: If no user id is given or stored
        """
        ...

    def logout(self) -> None:
        """Forget the stored token."""
        ...

    def stored_token(self) -> Optional[str]:
        """The raw token currently in storage, or None."""
        ...

    def current_user_id(self) -> Optional[str]:
        """User id carried by the stored token, or None."""
        ...
