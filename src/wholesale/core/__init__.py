"""Core utilities and shared functionality."""

from wholesale.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    DuplicateKeyError,
    StorageError,
    CryptoError,
)
from wholesale.core.crypto import (
    PasswordEncryptor,
    wrap_encrypted,
    unwrap_encrypted,
    is_encrypted,
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "DuplicateKeyError",
    "StorageError",
    "CryptoError",
    "PasswordEncryptor",
    "wrap_encrypted",
    "unwrap_encrypted",
    "is_encrypted",
]
