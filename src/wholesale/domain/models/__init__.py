"""Domain models package."""

from wholesale.domain.models.enums import TransactionType
from wholesale.domain.models.account import Account
from wholesale.domain.models.transaction import AccountTransaction

__all__ = [
    "TransactionType",
    "Account",
    "AccountTransaction",
]
