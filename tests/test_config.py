"""Tests for app.config module."""
from unittest.mock import patch

from app.config import Settings
from app.services.encryption import is_enabled


def test_encryption_key_unset_by_default(monkeypatch):
    monkeypatch.delenv("ENCRYPTION_KEY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.encryption_key is None
    with patch("app.services.encryption.settings", settings):
        assert is_enabled() is False


def test_encryption_key_from_environment(monkeypatch):
    monkeypatch.setenv("ENCRYPTION_KEY", "a-valid-32-char-or-longer-secret")
    settings = Settings(_env_file=None)

    assert settings.encryption_key == "a-valid-32-char-or-longer-secret"
    with patch("app.services.encryption.settings", settings):
        assert is_enabled() is True


def test_short_encryption_key_is_disabled():
    with patch("app.services.encryption.settings", Settings(_env_file=None, encryption_key="short")):
        assert is_enabled() is False
