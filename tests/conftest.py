"""
Pytest configuration and fixtures for the wholesale accounts backend.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- Factory helpers for accounts and transactions
- A FastAPI test client bound to the test database
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from wholesale.main import create_app
from wholesale.config.settings import Settings, reset_settings
from wholesale.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from wholesale.repositories.sqlalchemy import orm_models  # noqa: F401
from wholesale.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyAccountTransactionRepository,
)
from wholesale.services import (
    AccountService,
    AccountData,
    AccountTransactionService,
    TransactionData,
)
from wholesale.domain.models import Account, AccountTransaction


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyAccountTransactionRepository:
    """Provide test AccountTransactionRepository."""
    return SqlAlchemyAccountTransactionRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def account_service(account_repo) -> AccountService:
    """Provide test AccountService."""
    return AccountService(account_repo=account_repo)


@pytest.fixture
def transaction_service(transaction_repo) -> AccountTransactionService:
    """Provide test AccountTransactionService."""
    return AccountTransactionService(transaction_repo=transaction_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


def make_account_data(
    account_no: str = "585309209",
    account_name: str = "SGSavings726",
    account_type: str = "Savings",
    balance_date: date = date(2018, 11, 8),
    currency: str = "SGD",
    opening_avail_bal: Decimal = Decimal("84327.51"),
) -> AccountData:
    """Build AccountData with sensible defaults."""
    return AccountData(
        account_no=account_no,
        account_name=account_name,
        account_type=account_type,
        balance_date=balance_date,
        currency=currency,
        opening_avail_bal=opening_avail_bal,
    )


def make_transaction_data(
    account_no: str = "585309209",
    account_name: str = "SGSavings726",
    value_date: date = date(2018, 11, 12),
    currency: str = "SGD",
    tx_type: str = "Credit",
    debit_amt: Optional[Decimal] = None,
    credit_amt: Optional[Decimal] = Decimal("9540.98"),
    tx_narrative: Optional[str] = "Salary",
) -> TransactionData:
    """Build TransactionData with sensible defaults."""
    return TransactionData(
        account_no=account_no,
        account_name=account_name,
        value_date=value_date,
        currency=currency,
        tx_type=tx_type,
        debit_amt=debit_amt,
        credit_amt=credit_amt,
        tx_narrative=tx_narrative,
    )


@pytest.fixture
def account_factory(account_service) -> Callable[..., Account]:
    """Factory for creating test accounts through the service."""

    def _create_account(**overrides) -> Account:
        return account_service.create_account(make_account_data(**overrides))

    return _create_account


@pytest.fixture
def transaction_factory(transaction_service) -> Callable[..., AccountTransaction]:
    """Factory for creating test transactions through the service."""

    def _create_transaction(**overrides) -> AccountTransaction:
        return transaction_service.create_transaction(make_transaction_data(**overrides))

    return _create_transaction


@pytest.fixture
def sample_account(account_factory) -> Account:
    """Create the reference Singapore savings account."""
    return account_factory()


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(database_url="sqlite:///:memory:", log_level="WARNING", _env_file=None)


@pytest.fixture
def client(test_engine, test_settings) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app = create_app(test_settings)
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()


@pytest.fixture
def account_payload() -> dict:
    """JSON body for the reference account."""
    return {
        "account_no": "585309209",
        "account_name": "SGSavings726",
        "account_type": "Savings",
        "balance_date": "2018-11-08",
        "currency": "SGD",
        "opening_avail_bal": "84327.51",
    }


@pytest.fixture
def transaction_payload() -> dict:
    """JSON body for a credit against the reference account."""
    return {
        "account_no": "585309209",
        "account_name": "SGSavings726",
        "value_date": "2018-11-12",
        "currency": "SGD",
        "debit_amt": None,
        "credit_amt": "9540.98",
        "tx_type": "Credit",
        "tx_narrative": "Salary",
    }
