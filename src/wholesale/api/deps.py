"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from wholesale.repositories.sqlalchemy.database import get_db
from wholesale.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyAccountTransactionRepository,
)
from wholesale.services import AccountService, AccountTransactionService


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountTransactionRepository:
    """Provide AccountTransactionRepository instance."""
    return SqlAlchemyAccountTransactionRepository(db)


def get_account_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(account_repo=account_repo)


def get_transaction_service(
    transaction_repo: SqlAlchemyAccountTransactionRepository = Depends(get_transaction_repo),
) -> AccountTransactionService:
    """Provide AccountTransactionService instance."""
    return AccountTransactionService(transaction_repo=transaction_repo)
