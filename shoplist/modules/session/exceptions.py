"""
Session module exceptions.

These exceptions are raised by the session manager and captured by the
auth store, which surfaces their message through AuthState.error.
"""

from shoplist.shared.exceptions import ShoplistError, AuthenticationError


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation needs a session and there is none."""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class InvalidCredentialsError(AuthenticationError):
    """Raised when login cannot match the supplied credentials to a user."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class NoTokenError(AuthenticationError):
    """Raised when a session restore finds no stored token."""

    def __init__(self, message: str = "No token found"):
        super().__init__(message, code="NO_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a stored token does not have the expected shape."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class SessionRestoreError(AuthenticationError):
    """Raised when the profile behind a stored token cannot be loaded."""

    def __init__(self, message: str = "Failed to load user"):
        super().__init__(message, code="SESSION_RESTORE_FAILED")


class RegistrationError(ShoplistError):
    """Raised when the remote store refuses to create a new user."""

    def __init__(self, message: str = "Registration failed"):
        super().__init__(message, code="REGISTRATION_FAILED")
