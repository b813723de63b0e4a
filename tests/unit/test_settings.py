"""
Unit tests for Settings and encrypted credential resolution.
"""

import pytest

from wholesale.config.settings import Settings, get_settings, set_settings, reset_settings
from wholesale.core.crypto import PasswordEncryptor, wrap_encrypted
from wholesale.core.exceptions import CryptoError

FAST = 1_000


def make_settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestDatabaseUrl:
    """Tests for get_database_url()."""

    def test_default_is_local_sqlite(self):
        settings = make_settings()

        assert settings.get_database_url().startswith("sqlite:///")
        assert settings.is_sqlite

    def test_plain_password_is_injected(self):
        settings = make_settings(
            database_url="postgresql+psycopg2://db.internal:5432/wholesale",
            database_user="wholesale",
            database_password="daminda@77",
        )

        url = settings.get_database_url()

        assert url.startswith("postgresql+psycopg2://wholesale:")
        assert "daminda%4077@db.internal:5432/wholesale" in url
        assert not settings.is_sqlite

    def test_encrypted_password_is_decrypted(self):
        ciphertext = PasswordEncryptor("passphrase", iterations=FAST).encrypt("daminda@77")
        settings = make_settings(
            database_url="postgresql://db.internal/wholesale",
            database_user="wholesale",
            database_password=wrap_encrypted(ciphertext),
            encryptor_password="passphrase",
            encryptor_iterations=FAST,
        )

        assert settings.get_database_password() == "daminda@77"
        assert "daminda%4077" in settings.get_database_url()

    def test_encrypted_password_without_passphrase_fails(self):
        settings = make_settings(database_password="ENC(abc)")

        with pytest.raises(CryptoError):
            settings.get_database_password()

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
        monkeypatch.setenv("ENCRYPTOR_PASSWORD", "from-env")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = make_settings()

        assert settings.database_url == "sqlite:///:memory:"
        assert settings.encryptor_password == "from-env"
        assert settings.log_level == "DEBUG"


class TestGlobalSettings:
    """Tests for the process-wide settings accessors."""

    def test_set_and_reset(self):
        custom = make_settings(app_name="Custom")
        set_settings(custom)
        try:
            assert get_settings() is custom
        finally:
            reset_settings()

        assert get_settings() is not custom
        reset_settings()
