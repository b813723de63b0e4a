"""Repository protocol definitions (interfaces)."""

from wholesale.repositories.protocols.account_repo import AccountRepository
from wholesale.repositories.protocols.transaction_repo import AccountTransactionRepository

__all__ = [
    "AccountRepository",
    "AccountTransactionRepository",
]
