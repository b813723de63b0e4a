"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    Numeric,
    Index,
)

from wholesale.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_no = Column(String(20), unique=True, nullable=False)
    account_name = Column(String(100), nullable=False)
    account_type = Column(String(50), nullable=False, index=True)
    balance_date = Column(Date, nullable=False)
    currency = Column(String(3), nullable=False, index=True)
    opening_avail_bal = Column(Numeric(precision=15, scale=2), nullable=False)


class AccountTransactionORM(Base):
    """SQLAlchemy model for AccountTransaction.

    ``account_no`` deliberately has no foreign key to ``accounts``.
    """

    __tablename__ = "account_transactions"
    __table_args__ = (
        Index("ix_account_transactions_account_no_value_date", "account_no", "value_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_no = Column(String(20), nullable=False)
    account_name = Column(String(100), nullable=False)
    value_date = Column(Date, nullable=False)
    currency = Column(String(3), nullable=False, index=True)
    debit_amt = Column(Numeric(precision=15, scale=2), nullable=True)
    credit_amt = Column(Numeric(precision=15, scale=2), nullable=True)
    tx_type = Column(String(50), nullable=False)
    tx_narrative = Column(String(500), nullable=True)


# Primary keys are 32-bit INTEGER columns on every supported backend
MAX_ROW_ID = 2**31 - 1


def is_row_id(value: int) -> bool:
    """Whether ``value`` fits the primary key column; larger ids cannot exist."""
    return 1 <= value <= MAX_ROW_ID
