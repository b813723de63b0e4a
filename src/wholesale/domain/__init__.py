"""Domain layer - plain record models with no external dependencies."""

from wholesale.domain.models import Account, AccountTransaction, TransactionType

__all__ = [
    "Account",
    "AccountTransaction",
    "TransactionType",
]
