"""Account transaction repository protocol."""

from datetime import date
from typing import Protocol, Optional

from wholesale.domain.models import AccountTransaction


class AccountTransactionRepository(Protocol):
    """Interface for account transaction data access."""

    def create(self, transaction: AccountTransaction) -> AccountTransaction:
        """Persist a new transaction and return it with its assigned id."""
        ...

    def get_by_id(self, txn_id: int) -> Optional[AccountTransaction]:
        """Retrieve transaction by ID."""
        ...

    def list_all(self) -> list[AccountTransaction]:
        ...

    def list_by_account_no(self, account_no: str) -> list[AccountTransaction]:
        """List all transactions for an account number."""
        ...

    def list_by_date_range(
        self,
        account_no: str,
        start_date: date,
        end_date: date,
    ) -> list[AccountTransaction]:
        """List an account's transactions with value_date in [start_date, end_date]."""
        ...

    def list_by_account_and_type(self, account_no: str, tx_type: str) -> list[AccountTransaction]:
        ...

    def list_by_type(self, tx_type: str) -> list[AccountTransaction]:
        ...

    def list_by_currency(self, currency: str) -> list[AccountTransaction]:
        ...

    def exists_by_id(self, txn_id: int) -> bool:
        ...

    def update(self, transaction: AccountTransaction) -> Optional[AccountTransaction]:
        """Overwrite an existing transaction; None if the row is gone."""
        ...

    def delete(self, txn_id: int) -> bool:
        """Delete a transaction; False if nothing was deleted."""
        ...
