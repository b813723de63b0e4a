"""SQLAlchemy repository implementations."""

from wholesale.repositories.sqlalchemy.database import (
    build_engine,
    configure_database,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from wholesale.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from wholesale.repositories.sqlalchemy.transaction_repo import (
    SqlAlchemyAccountTransactionRepository,
)

__all__ = [
    "build_engine",
    "configure_database",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyAccountTransactionRepository",
]
