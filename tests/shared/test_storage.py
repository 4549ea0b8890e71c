"""Tests for shared/storage.py."""

import json

from shoplist.shared.storage import (
    ITokenStorage,
    MemoryTokenStorage,
    FileTokenStorage,
)


class TestMemoryTokenStorage:
    def test_empty_by_default(self):
        """Should hold no token until one is set."""
        assert MemoryTokenStorage().get_token() is None

    def test_set_and_remove(self):
        """Should return the last token set and forget it on remove."""
        storage = MemoryTokenStorage()
        storage.set_token("token_a")
        storage.set_token("token_b")
        assert storage.get_token() == "token_b"

        storage.remove_token()
        assert storage.get_token() is None

    def test_remove_without_token(self):
        """Should not fail when there is nothing to remove."""
        MemoryTokenStorage().remove_token()

    def test_implements_interface(self):
        """Should satisfy ITokenStorage."""
        assert isinstance(MemoryTokenStorage(), ITokenStorage)


class TestFileTokenStorage:
    def test_missing_file_means_no_session(self, tmp_path):
        """Should return None when the file does not exist."""
        storage = FileTokenStorage(path=tmp_path / "session.json")
        assert storage.get_token() is None

    def test_persists_across_instances(self, tmp_path):
        """Should read back a token written by another instance."""
        path = tmp_path / "nested" / "session.json"
        FileTokenStorage(path=path).set_token("token_u1_1_abc")

        assert FileTokenStorage(path=path).get_token() == "token_u1_1_abc"
        assert json.loads(path.read_text()) == {"authToken": "token_u1_1_abc"}

    def test_keeps_other_keys(self, tmp_path):
        """Should not clobber unrelated keys in the same file."""
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"theme": "dark"}))

        storage = FileTokenStorage(path=path)
        storage.set_token("token_u1_1_abc")
        storage.remove_token()

        assert json.loads(path.read_text()) == {"theme": "dark"}

    def test_custom_key(self, tmp_path):
        """Should store the token under the configured key."""
        path = tmp_path / "session.json"
        FileTokenStorage(path=path, key="bearer").set_token("t")
        assert json.loads(path.read_text()) == {"bearer": "t"}

    def test_unreadable_file_is_ignored(self, tmp_path):
        """Should treat a corrupt file as no session."""
        path = tmp_path / "session.json"
        path.write_text("{not json")
        assert FileTokenStorage(path=path).get_token() is None

    def test_defaults_come_from_settings(self, tmp_path):
        """Should use the configured path when none is given."""
        storage = FileTokenStorage()
        assert storage.path == tmp_path / "session.json"

    def test_implements_interface(self, tmp_path):
        """Should satisfy ITokenStorage."""
        assert isinstance(FileTokenStorage(path=tmp_path / "s.json"), ITokenStorage)
