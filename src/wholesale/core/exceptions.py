"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 500

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class DuplicateKeyError(AppError):
    """Raised when a unique secondary key is already in use."""

    status_code = 400

    def __init__(self, resource: str, key):
        super().__init__(f"{resource} with number '{key}' already exists", code="DUPLICATE_KEY")


class StorageError(AppError):
    """Raised when the underlying store fails."""

    def __init__(self, message: str):
        super().__init__(message, code="STORAGE_ERROR")


class CryptoError(AppError):
    """Raised when a secret cannot be encrypted or decrypted."""

    def __init__(self, message: str):
        super().__init__(message, code="CRYPTO_ERROR")
