"""
Password-based encryption for configuration secrets.

A passphrase is stretched with PBKDF2-HMAC-SHA256 over a random salt into a
Fernet key (AES-128-CBC + HMAC-SHA256). The stored ciphertext is the
URL-safe base64 encoding of ``salt || token`` so it carries everything but
the passphrase. Values in configuration files are wrapped as ``ENC(...)``.
"""

import base64
import binascii
import logging
import os

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from wholesale.core.exceptions import CryptoError

logger = logging.getLogger(__name__)

SALT_SIZE = 16
DEFAULT_ITERATIONS = 390_000
ENC_PREFIX = "ENC("
ENC_SUFFIX = ")"


class PasswordEncryptor:
    """Encrypts and decrypts short strings with a passphrase."""

    def __init__(self, passphrase: str, iterations: int = DEFAULT_ITERATIONS):
        if not passphrase:
            raise CryptoError("Encryption passphrase must not be empty")
        if iterations < 1:
            raise CryptoError("Key derivation iterations must be positive")
        self._passphrase = passphrase.encode("utf-8")
        self._iterations = iterations

    def _fernet(self, salt: bytes) -> Fernet:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=self._iterations,
        )
        key = base64.urlsafe_b64encode(kdf.derive(self._passphrase))
        return Fernet(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext; every call uses a fresh salt."""
        salt = os.urandom(SALT_SIZE)
        token = self._fernet(salt).encrypt(plaintext.encode("utf-8"))
        raw = salt + base64.urlsafe_b64decode(token)
        return base64.urlsafe_b64encode(raw).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value produced by :meth:`encrypt`."""
        try:
            raw = base64.urlsafe_b64decode(ciphertext.encode("ascii"))
        except (binascii.Error, UnicodeEncodeError) as e:
            raise CryptoError(f"Ciphertext is not valid base64: {e}") from e

        if len(raw) <= SALT_SIZE:
            raise CryptoError("Ciphertext is too short")

        salt, token = raw[:SALT_SIZE], raw[SALT_SIZE:]
        try:
            plaintext = self._fernet(salt).decrypt(base64.urlsafe_b64encode(token))
        except InvalidToken as e:
            logger.error("Failed to decrypt secret: wrong passphrase or corrupted ciphertext")
            raise CryptoError("Unable to decrypt value: wrong passphrase or corrupted data") from e
        return plaintext.decode("utf-8")


def is_encrypted(value: str) -> bool:
    """Return True if a configuration value is wrapped as ENC(...)."""
    value = value.strip()
    return value.startswith(ENC_PREFIX) and value.endswith(ENC_SUFFIX)


def wrap_encrypted(ciphertext: str) -> str:
    return f"{ENC_PREFIX}{ciphertext}{ENC_SUFFIX}"


def unwrap_encrypted(value: str) -> str:
    """Strip the ENC(...) marker from a configuration value."""
    value = value.strip()
    if not is_encrypted(value):
        raise CryptoError("Value is not wrapped in ENC(...)")
    return value[len(ENC_PREFIX):-len(ENC_SUFFIX)]
