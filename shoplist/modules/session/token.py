"""
Session token value object.

Tokens look like ``token_<subject>_<issuedAtMillis>_<nonce>``. The server
treats them as opaque; the client parses them only to recover the user id.
They are NOT signed and prove nothing about the bearer.
"""

import re
import secrets
import string
import time
from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import InvalidTokenError

TOKEN_PREFIX = "token_"
NONCE_LENGTH = 9
_NONCE_ALPHABET = string.digits + string.ascii_lowercase
_TOKEN_TAIL = re.compile(
    r"(?P<subject>.+)_(?P<issued_at>\d+)_(?P<nonce>[0-9a-z]+)",
    re.DOTALL,
)


def _new_nonce() -> str:
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(NONCE_LENGTH))


class SessionToken(BaseModel):
    """Structured form of a bearer token."""

    subject: str = Field(..., min_length=1, description="User ID the token speaks for")
    issued_at: int = Field(..., ge=0, description="Issue time, epoch milliseconds")
    nonce: str = Field(
        ...,
        min_length=1,
        pattern=r"^[0-9a-z]+$",
        description="Random suffix",
    )

    model_config = {"frozen": True}

    @classmethod
    def issue(cls, subject: str, issued_at: Optional[int] = None) -> "SessionToken":
        """Mint a new token for a user, stamped with the current time."""
        if issued_at is None:
            issued_at = int(time.time() * 1000)
        return cls(subject=subject, issued_at=issued_at, nonce=_new_nonce())

    def encode(self) -> str:
        return f"{TOKEN_PREFIX}{self.subject}_{self.issued_at}_{self.nonce}"

    @classmethod
    def decode(cls, raw: str) -> "SessionToken":
        """
        Parse an encoded token.

        The subject may itself contain underscores; the issue time and
        nonce are always the last two segments.

        Raises:
            InvalidTokenError: if raw is not a token this client issued.
        """
        if not raw or not raw.startswith(TOKEN_PREFIX):
            raise InvalidTokenError()

        match = _TOKEN_TAIL.fullmatch(raw[len(TOKEN_PREFIX):])
        if match is None:
            raise InvalidTokenError()

        return cls(
            subject=match.group("subject"),
            issued_at=int(match.group("issued_at")),
            nonce=match.group("nonce"),
        )

    def __str__(self) -> str:
        return self.encode()
