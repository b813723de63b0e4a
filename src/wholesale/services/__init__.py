"""Service layer - business logic orchestration."""

from wholesale.services.account_service import AccountService, AccountData
from wholesale.services.transaction_service import (
    AccountTransactionService,
    TransactionData,
)

__all__ = [
    "AccountService",
    "AccountData",
    "AccountTransactionService",
    "TransactionData",
]
