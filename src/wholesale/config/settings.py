"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from wholesale.core.crypto import (
    DEFAULT_ITERATIONS,
    PasswordEncryptor,
    is_encrypted,
    unwrap_encrypted,
)
from wholesale.core.exceptions import CryptoError


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Wholesale Engineering API"
    app_version: str = "2.0.0"
    api_prefix: str = "/api/v1"

    # Datastore
    database_url: str = "sqlite:///./wholesale.db"
    database_user: Optional[str] = None
    # Plain text or ENC(...) produced by wholesale-encrypt
    database_password: Optional[str] = None
    db_echo: bool = False

    # Passphrase for ENC(...) values, normally supplied via ENCRYPTOR_PASSWORD
    encryptor_password: Optional[str] = None
    encryptor_iterations: int = DEFAULT_ITERATIONS

    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    def get_encryptor(self) -> PasswordEncryptor:
        """Build the encryptor for ENC(...) configuration values."""
        if not self.encryptor_password:
            raise CryptoError(
                "Encrypted configuration value found but ENCRYPTOR_PASSWORD is not set"
            )
        return PasswordEncryptor(self.encryptor_password, iterations=self.encryptor_iterations)

    def get_database_password(self) -> Optional[str]:
        """Return the datastore password, decrypting it if needed."""
        if not self.database_password:
            return None
        if is_encrypted(self.database_password):
            return self.get_encryptor().decrypt(unwrap_encrypted(self.database_password))
        return self.database_password

    def get_database_url(self) -> str:
        """Get database URL with credentials applied."""
        url = make_url(self.database_url)
        if self.database_user:
            url = url.set(username=self.database_user)
        password = self.get_database_password()
        if password:
            url = url.set(password=password)
        return url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.database_url).get_backend_name() == "sqlite"


# Process-wide default; components still take settings explicitly
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
