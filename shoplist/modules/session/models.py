"""
Session module data models.

These models describe users as stored remotely and the payloads exchanged
by the register/login/update-profile operations.
"""

from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field

from shoplist.shared.models import WireModel, Patch


class User(WireModel):
    """
    A user record as persisted in the remote `users` collection.

    Carries the password hash; never hand this to callers outside the
    session module. Use to_profile() instead.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    password: str = Field(default="", description="bcrypt hash of the password")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    cell_phone: str = Field(default="", description="Cell phone number")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    def to_profile(self) -> "UserProfile":
        """Strip the password and timestamps."""
        return UserProfile(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            cell_phone=self.cell_phone,
        )


class UserProfile(WireModel):
    """Public view of a user, as held in the session."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    cell_phone: str = Field(default="", description="Cell phone number")

    model_config = {"frozen": True}


class UserRegistration(WireModel):
    """Payload for creating a new account."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Plaintext password")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    cell_phone: str = Field(default="", description="Cell phone number")


class UserLogin(WireModel):
    """Credentials for login."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Plaintext password")


class UserUpdate(Patch):
    """Partial profile update. Only fields that are set are sent."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    cell_phone: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResult(WireModel):
    """Outcome of a successful login or registration."""

    user: UserProfile
    token: str


class ValidationResult(WireModel):
    """Outcome of a form validation: field name -> first error message."""

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
