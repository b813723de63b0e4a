"""Pydantic schemas for API request/response."""

from wholesale.api.schemas.account import (
    AccountCreateRequest,
    AccountUpdateRequest,
    AccountResponse,
)
from wholesale.api.schemas.transaction import (
    TransactionRequest,
    TransactionResponse,
)

__all__ = [
    "AccountCreateRequest",
    "AccountUpdateRequest",
    "AccountResponse",
    "TransactionRequest",
    "TransactionResponse",
]
