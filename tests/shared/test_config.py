"""Tests for shared/config.py."""

from unittest.mock import patch
from pathlib import Path
import os

from shoplist.shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.api_base_url == "http://localhost:3001"
        assert settings.request_timeout == 10.0
        assert settings.token_storage_key == "authToken"
        assert settings.token_storage_path == Path.home() / ".shoplist" / "session.json"
        assert settings.password_hash_rounds == 10
        assert settings.verify_passwords is False
        assert settings.log_level == "INFO"

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {
            "SHOPLIST_API_BASE_URL": "http://store.internal:8080",
            "SHOPLIST_REQUEST_TIMEOUT": "2.5",
            "SHOPLIST_VERIFY_PASSWORDS": "true",
        }):
            settings = Settings()
            assert settings.api_base_url == "http://store.internal:8080"
            assert settings.request_timeout == 2.5
            assert settings.verify_passwords is True

    def test_ignores_unprefixed_env(self):
        """Settings should not pick up variables without the SHOPLIST_ prefix."""
        with patch.dict(os.environ, {"API_BASE_URL": "http://elsewhere"}):
            settings = Settings()
            assert settings.api_base_url != "http://elsewhere"

    def test_token_storage_path_from_env(self, tmp_path):
        """Settings should parse the token storage path as a Path."""
        target = tmp_path / "tokens.json"
        with patch.dict(os.environ, {"SHOPLIST_TOKEN_STORAGE_PATH": str(target)}):
            settings = Settings()
            assert settings.token_storage_path == target


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
