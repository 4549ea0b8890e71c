"""
Durable client storage for the bearer token.

The session is represented by a single key holding the current token
string; absence of the key means "no session". Two implementations:
- MemoryTokenStorage: process-local, used by tests and short-lived tools
- FileTokenStorage: persists the key to a small JSON file
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class ITokenStorage(Protocol):
    """Interface for reading and writing the stored bearer token."""

    def get_token(self) -> Optional[str]:
        """Return the stored token, or None if there is no session."""
        ...

    def set_token(self, token: str) -> None:
        """Persist the token, replacing any previous one."""
        ...

    def remove_token(self) -> None:
        """Forget the stored token. Never fails if none is stored."""
        ...


class MemoryTokenStorage:
    """Token storage held in memory for the lifetime of the object."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get_token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def remove_token(self) -> None:
        self._token = None


class FileTokenStorage:
    """
    Token storage backed by a JSON file.

    The file holds a flat object so other client keys can live next to
    the token without being clobbered.
    """

    def __init__(self, path: Optional[Path] = None, key: Optional[str] = None):
        settings = get_settings()
        self._path = Path(path) if path is not None else settings.token_storage_path
        self._key = key or settings.token_storage_key

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token storage at {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def get_token(self) -> Optional[str]:
        token = self._read().get(self._key)
        return token or None

    def set_token(self, token: str) -> None:
        data = self._read()
        data[self._key] = token
        self._write(data)

    def remove_token(self) -> None:
        data = self._read()
        if self._key in data:
            del data[self._key]
            self._write(data)
