"""
Session module.

Derives a user identity from the stored bearer token and exposes
register/login/restore/logout/update-profile.

Public API:
- ISessionManager: Interface for session operations
- SessionManager: Implementation over the remote users collection
- SessionToken: Structured bearer token (encode/decode)
- User, UserProfile, UserRegistration, UserLogin, UserUpdate, LoginResult
- Password helpers and form validators
- Session exceptions: NotAuthenticatedError, InvalidCredentialsError, etc.
"""

from .interfaces import ISessionManager
from .service import SessionManager
from .token import SessionToken
from .models import (
    User,
    UserProfile,
    UserRegistration,
    UserLogin,
    UserUpdate,
    LoginResult,
    ValidationResult,
)
from .passwords import hash_password, verify_password
from .validation import (
    validate_email,
    validate_password,
    validate_phone_number,
    validate_name,
    validate_registration_form,
    validate_login_form,
)
from .exceptions import (
    NotAuthenticatedError,
    InvalidCredentialsError,
    NoTokenError,
    InvalidTokenError,
    SessionRestoreError,
    RegistrationError,
)

__all__ = [
    # Interface
    "ISessionManager",
    "SessionManager",
    "SessionToken",
    # Models
    "User",
    "UserProfile",
    "UserRegistration",
    "UserLogin",
    "UserUpdate",
    "LoginResult",
    "ValidationResult",
    # Passwords and validation
    "hash_password",
    "verify_password",
    "validate_email",
    "validate_password",
    "validate_phone_number",
    "validate_name",
    "validate_registration_form",
    "validate_login_form",
    # Exceptions
    "NotAuthenticatedError",
    "InvalidCredentialsError",
    "NoTokenError",
    "InvalidTokenError",
    "SessionRestoreError",
    "RegistrationError",
]
