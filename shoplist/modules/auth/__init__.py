"""
Authentication state module.

Holds the session entity (user, token, is_authenticated, loading, error)
and applies the outcomes of session manager operations.

Public API:
- AuthStore: Lifecycle-driven store over ISessionManager
- AuthState: The session entity
- AuthStatus: idle / pending / authenticated / unauthenticated
"""

from .models import AuthState, AuthStatus
from .store import AuthStore

__all__ = [
    "AuthStore",
    "AuthState",
    "AuthStatus",
]
