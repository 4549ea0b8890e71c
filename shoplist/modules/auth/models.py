"""
Auth module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field

from shoplist.modules.session.models import UserProfile


class AuthStatus(str, Enum):
    """Where the session state machine currently is."""

    IDLE = "idle"                        # Nothing attempted yet
    PENDING = "pending"                  # An auth action is in flight
    AUTHENTICATED = "authenticated"      # user and token are set
    UNAUTHENTICATED = "unauthenticated"  # Signed out, possibly with an error


class AuthState(BaseModel):
    """
    The client's belief about who is signed in.

    is_authenticated is derived, so it can never disagree with the
    presence of user and token.
    """

    user: Optional[UserProfile] = Field(None, description="Signed-in user")
    token: Optional[str] = Field(None, description="Current bearer token")
    loading: bool = Field(default=False, description="An auth action is in flight")
    error: Optional[str] = Field(None, description="Last failure message")
    status: AuthStatus = Field(default=AuthStatus.IDLE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token is not None
