"""SQLAlchemy implementation of AccountRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from wholesale.domain.models import Account
from wholesale.repositories.sqlalchemy.errors import storage_errors
from wholesale.repositories.sqlalchemy.orm_models import AccountORM, is_row_id


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_no=account.account_no,
            account_name=account.account_name,
            account_type=account.account_type,
            balance_date=account.balance_date,
            currency=account.currency,
            opening_avail_bal=account.opening_avail_bal,
        )
        with storage_errors(self._db, "Account", unique_key=account.account_no):
            self._db.add(orm_account)
            self._db.commit()
            self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        if not is_row_id(account_id):
            return None
        with storage_errors(self._db, "Account"):
            orm_account = self._db.get(AccountORM, account_id)
        return self._to_domain(orm_account) if orm_account else None

    def get_by_account_no(self, account_no: str) -> Optional[Account]:
        """Retrieve account by account number."""
        with storage_errors(self._db, "Account"):
            orm_account = self._db.query(AccountORM).filter(
                AccountORM.account_no == account_no
            ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_all(self) -> list[Account]:
        """List all accounts."""
        return self._list()

    def list_by_type(self, account_type: str) -> list[Account]:
        return self._list(AccountORM.account_type == account_type)

    def list_by_currency(self, currency: str) -> list[Account]:
        return self._list(AccountORM.currency == currency.upper())

    def exists_by_id(self, account_id: int) -> bool:
        if not is_row_id(account_id):
            return False
        with storage_errors(self._db, "Account"):
            query = self._db.query(AccountORM.id).filter(AccountORM.id == account_id)
            return self._db.query(query.exists()).scalar()

    def exists_by_account_no(self, account_no: str) -> bool:
        with storage_errors(self._db, "Account"):
            query = self._db.query(AccountORM.id).filter(AccountORM.account_no == account_no)
            return self._db.query(query.exists()).scalar()

    def update(self, account: Account) -> Optional[Account]:
        """Overwrite the mutable fields of an existing account."""
        if account.id is None or not is_row_id(account.id):
            return None
        with storage_errors(self._db, "Account"):
            orm_account = self._db.get(AccountORM, account.id)
            if orm_account is None:
                return None

            orm_account.account_name = account.account_name
            orm_account.account_type = account.account_type
            orm_account.balance_date = account.balance_date
            orm_account.currency = account.currency
            orm_account.opening_avail_bal = account.opening_avail_bal
            self._db.commit()
            self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def delete(self, account_id: int) -> bool:
        """Delete an account."""
        if not is_row_id(account_id):
            return False
        with storage_errors(self._db, "Account"):
            deleted = self._db.query(AccountORM).filter(
                AccountORM.id == account_id
            ).delete()
            self._db.commit()
        return deleted > 0

    def _list(self, *criteria) -> list[Account]:
        with storage_errors(self._db, "Account"):
            query = self._db.query(AccountORM)
            if criteria:
                query = query.filter(*criteria)
            orm_accounts = query.order_by(AccountORM.id).all()
        return [self._to_domain(a) for a in orm_accounts]

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            id=orm.id,
            account_no=orm.account_no,
            account_name=orm.account_name,
            account_type=orm.account_type,
            balance_date=orm.balance_date,
            currency=orm.currency,
            opening_avail_bal=Decimal(str(orm.opening_avail_bal)),
        )
