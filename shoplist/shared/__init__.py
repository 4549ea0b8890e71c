"""
Shared infrastructure for shoplist.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: camelCase wire model and patch bases
- actions: pending/fulfilled/rejected lifecycle for store actions
- storage: Durable bearer-token storage
- logging: Console logging setup for host applications

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    ShoplistError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)
from .models import WireModel, Patch
from .actions import ActionPhase, ActionResult, ActionStore
from .storage import ITokenStorage, MemoryTokenStorage, FileTokenStorage
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "ShoplistError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "WireModel",
    "Patch",
    "ActionPhase",
    "ActionResult",
    "ActionStore",
    "ITokenStorage",
    "MemoryTokenStorage",
    "FileTokenStorage",
    "setup_logging",
]
