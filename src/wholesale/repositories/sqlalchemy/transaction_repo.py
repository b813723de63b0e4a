"""SQLAlchemy implementation of AccountTransactionRepository."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from wholesale.domain.models import AccountTransaction
from wholesale.repositories.sqlalchemy.errors import storage_errors
from wholesale.repositories.sqlalchemy.orm_models import AccountTransactionORM, is_row_id


class SqlAlchemyAccountTransactionRepository:
    """SQLAlchemy-backed account transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: AccountTransaction) -> AccountTransaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        with storage_errors(self._db, "Transaction"):
            self._db.add(orm_txn)
            self._db.commit()
            self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def get_by_id(self, txn_id: int) -> Optional[AccountTransaction]:
        """Retrieve transaction by ID."""
        if not is_row_id(txn_id):
            return None
        with storage_errors(self._db, "Transaction"):
            orm_txn = self._db.get(AccountTransactionORM, txn_id)
        return self._to_domain(orm_txn) if orm_txn else None

    def list_all(self) -> list[AccountTransaction]:
        return self._list()

    def list_by_account_no(self, account_no: str) -> list[AccountTransaction]:
        """List all transactions for an account number."""
        return self._list(AccountTransactionORM.account_no == account_no)

    def list_by_date_range(
        self,
        account_no: str,
        start_date: date,
        end_date: date,
    ) -> list[AccountTransaction]:
        """List an account's transactions between two value dates (inclusive)."""
        conditions = and_(
            AccountTransactionORM.account_no == account_no,
            AccountTransactionORM.value_date >= start_date,
            AccountTransactionORM.value_date <= end_date,
        )
        return self._list(
            conditions,
            order_by=(AccountTransactionORM.value_date, AccountTransactionORM.id),
        )

    def list_by_account_and_type(self, account_no: str, tx_type: str) -> list[AccountTransaction]:
        return self._list(
            AccountTransactionORM.account_no == account_no,
            AccountTransactionORM.tx_type == tx_type,
        )

    def list_by_type(self, tx_type: str) -> list[AccountTransaction]:
        return self._list(AccountTransactionORM.tx_type == tx_type)

    def list_by_currency(self, currency: str) -> list[AccountTransaction]:
        return self._list(AccountTransactionORM.currency == currency.upper())

    def exists_by_id(self, txn_id: int) -> bool:
        if not is_row_id(txn_id):
            return False
        with storage_errors(self._db, "Transaction"):
            query = self._db.query(AccountTransactionORM.id).filter(
                AccountTransactionORM.id == txn_id
            )
            return self._db.query(query.exists()).scalar()

    def update(self, transaction: AccountTransaction) -> Optional[AccountTransaction]:
        """Overwrite every field of an existing transaction except its id."""
        if transaction.id is None or not is_row_id(transaction.id):
            return None
        with storage_errors(self._db, "Transaction"):
            orm_txn = self._db.get(AccountTransactionORM, transaction.id)
            if orm_txn is None:
                return None

            orm_txn.account_no = transaction.account_no
            orm_txn.account_name = transaction.account_name
            orm_txn.value_date = transaction.value_date
            orm_txn.currency = transaction.currency
            orm_txn.debit_amt = transaction.debit_amt
            orm_txn.credit_amt = transaction.credit_amt
            orm_txn.tx_type = transaction.tx_type
            orm_txn.tx_narrative = transaction.tx_narrative
            self._db.commit()
            self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def delete(self, txn_id: int) -> bool:
        """Delete a transaction."""
        if not is_row_id(txn_id):
            return False
        with storage_errors(self._db, "Transaction"):
            deleted = self._db.query(AccountTransactionORM).filter(
                AccountTransactionORM.id == txn_id
            ).delete()
            self._db.commit()
        return deleted > 0

    def _list(self, *criteria, order_by=(AccountTransactionORM.id,)) -> list[AccountTransaction]:
        with storage_errors(self._db, "Transaction"):
            query = self._db.query(AccountTransactionORM)
            if criteria:
                query = query.filter(*criteria)
            orm_txns = query.order_by(*order_by).all()
        return [self._to_domain(t) for t in orm_txns]

    @staticmethod
    def _to_orm(txn: AccountTransaction) -> AccountTransactionORM:
        """Convert domain model to ORM model."""
        return AccountTransactionORM(
            account_no=txn.account_no,
            account_name=txn.account_name,
            value_date=txn.value_date,
            currency=txn.currency,
            debit_amt=txn.debit_amt,
            credit_amt=txn.credit_amt,
            tx_type=txn.tx_type,
            tx_narrative=txn.tx_narrative,
        )

    @staticmethod
    def _to_domain(orm: AccountTransactionORM) -> AccountTransaction:
        """Convert ORM model to domain model."""
        return AccountTransaction(
            id=orm.id,
            account_no=orm.account_no,
            account_name=orm.account_name,
            value_date=orm.value_date,
            currency=orm.currency,
            debit_amt=Decimal(str(orm.debit_amt)) if orm.debit_amt is not None else None,
            credit_amt=Decimal(str(orm.credit_amt)) if orm.credit_amt is not None else None,
            tx_type=orm.tx_type,
            tx_narrative=orm.tx_narrative,
        )
