"""Tests for the session token value object."""

import pytest
from pydantic import ValidationError

from shoplist.modules.session.token import SessionToken, NONCE_LENGTH, TOKEN_PREFIX
from shoplist.modules.session.exceptions import InvalidTokenError


class TestIssue:
    def test_issue_stamps_time_and_nonce(self):
        """Should mint a token with a millisecond timestamp and base-36 nonce."""
        token = SessionToken.issue("user-1", issued_at=1700000000000)

        assert token.subject == "user-1"
        assert token.issued_at == 1700000000000
        assert len(token.nonce) == NONCE_LENGTH
        assert token.nonce.isalnum() and token.nonce == token.nonce.lower()

    def test_issue_defaults_to_now(self):
        """Should use the current time when none is given."""
        token = SessionToken.issue("user-1")
        assert token.issued_at > 1_600_000_000_000

    def test_nonces_differ(self):
        """Two tokens for the same user should not collide."""
        assert SessionToken.issue("u").nonce != SessionToken.issue("u").nonce

    def test_rejects_empty_subject(self):
        """Should refuse to mint a token without a subject."""
        with pytest.raises(ValidationError):
            SessionToken.issue("")


class TestEncodeDecode:
    def test_encode_shape(self):
        """Should encode as token_<subject>_<issued_at>_<nonce>."""
        token = SessionToken(subject="abc", issued_at=12, nonce="x9y")
        assert token.encode() == "token_abc_12_x9y"
        assert str(token) == "token_abc_12_x9y"

    @pytest.mark.parametrize("subject", ["1", "user-42", "a_b_c", "9f1c_77_x"])
    def test_subject_survives(self, subject):
        """Decoding an issued token should return the same subject."""
        raw = SessionToken.issue(subject).encode()
        assert SessionToken.decode(raw).subject == subject

    def test_decode_splits_from_the_right(self):
        """Underscores in the subject should not confuse the parser."""
        token = SessionToken.decode("token_a_1_b_1700000000000_abc123xyz")
        assert token.subject == "a_1_b"
        assert token.issued_at == 1700000000000
        assert token.nonce == "abc123xyz"

    @pytest.mark.parametrize("raw", [
        "",
        "abc",
        "token_",
        "token_user",
        "token_user_123",
        "bearer_user_123_abc",
        "token_user_notanumber_abc",
        "token_user_123_ABC",
        "token_user_123_abc\n",
    ])
    def test_decode_rejects_other_shapes(self, raw):
        """Should raise InvalidTokenError for anything it did not issue."""
        with pytest.raises(InvalidTokenError):
            SessionToken.decode(raw)

    def test_prefix(self):
        assert TOKEN_PREFIX == "token_"
