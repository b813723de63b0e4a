"""Repository layer - data access abstractions and implementations."""

from wholesale.repositories.protocols import (
    AccountRepository,
    AccountTransactionRepository,
)

__all__ = [
    "AccountRepository",
    "AccountTransactionRepository",
]
