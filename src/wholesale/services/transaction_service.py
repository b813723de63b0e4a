"""Account transaction service."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from wholesale.core.exceptions import ValidationError, NotFoundError
from wholesale.domain.models import AccountTransaction, TransactionType
from wholesale.repositories.protocols import AccountTransactionRepository

logger = logging.getLogger(__name__)


@dataclass
class TransactionData:
    """Input data for creating or replacing a transaction."""

    account_no: str
    account_name: str
    value_date: date
    currency: str
    tx_type: str
    debit_amt: Optional[Decimal] = None
    credit_amt: Optional[Decimal] = None
    tx_narrative: Optional[str] = None


class AccountTransactionService:
    """
    Service for managing account transactions.

    Transactions are loosely coupled to accounts: the account number is
    stored as given and never looked up.
    """

    def __init__(self, transaction_repo: AccountTransactionRepository):
        self._transaction_repo = transaction_repo

    def list_transactions(self) -> list[AccountTransaction]:
        logger.debug("Fetching all transactions from database")
        transactions = self._transaction_repo.list_all()
        logger.info(f"Retrieved {len(transactions)} transactions")
        return transactions

    def get_transaction(self, txn_id: int) -> AccountTransaction:
        """Get transaction by ID."""
        logger.debug(f"Fetching transaction by ID: {txn_id}")
        transaction = self._transaction_repo.get_by_id(txn_id)
        if not transaction:
            logger.warning(f"Transaction not found with ID: {txn_id}")
            raise NotFoundError("Transaction", txn_id)
        logger.info(f"Transaction found with ID: {txn_id}")
        return transaction

    def list_by_account(self, account_no: str) -> list[AccountTransaction]:
        logger.debug(f"Fetching transactions for account: {account_no}")
        transactions = self._transaction_repo.list_by_account_no(account_no)
        logger.info(f"Retrieved {len(transactions)} transactions for account: {account_no}")
        return transactions

    def list_by_date_range(
        self,
        account_no: str,
        start_date: date,
        end_date: date,
    ) -> list[AccountTransaction]:
        """List an account's transactions with value dates in [start_date, end_date]."""
        if start_date > end_date:
            raise ValidationError(
                f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}"
            )
        logger.debug(
            f"Fetching transactions for account: {account_no} between {start_date} and {end_date}"
        )
        transactions = self._transaction_repo.list_by_date_range(account_no, start_date, end_date)
        logger.info(
            f"Retrieved {len(transactions)} transactions for account: {account_no} in date range"
        )
        return transactions

    def list_credit_transactions(self, account_no: str) -> list[AccountTransaction]:
        return self._list_by_account_and_type(account_no, TransactionType.CREDIT.value)

    def list_debit_transactions(self, account_no: str) -> list[AccountTransaction]:
        return self._list_by_account_and_type(account_no, TransactionType.DEBIT.value)

    def list_by_type(self, tx_type: str) -> list[AccountTransaction]:
        logger.debug(f"Fetching transactions by type: {tx_type}")
        transactions = self._transaction_repo.list_by_type(tx_type)
        logger.info(f"Retrieved {len(transactions)} transactions of type: {tx_type}")
        return transactions

    def list_by_currency(self, currency: str) -> list[AccountTransaction]:
        logger.debug(f"Fetching transactions by currency: {currency}")
        transactions = self._transaction_repo.list_by_currency(currency)
        logger.info(f"Retrieved {len(transactions)} transactions in currency: {currency}")
        return transactions

    def create_transaction(self, data: TransactionData) -> AccountTransaction:
        """Create a new transaction."""
        self._validate(data)
        logger.debug(f"Creating new transaction for account: {data.account_no}")

        created = self._transaction_repo.create(self._from_data(data))
        logger.info(
            f"Transaction created successfully with ID: {created.id} "
            f"for account: {created.account_no}"
        )
        return created

    def update_transaction(self, txn_id: int, data: TransactionData) -> AccountTransaction:
        """Replace every field of an existing transaction."""
        self._validate(data)
        logger.debug(f"Updating transaction: {txn_id}")

        if not self._transaction_repo.exists_by_id(txn_id):
            logger.error(f"Transaction not found for update with ID: {txn_id}")
            raise NotFoundError("Transaction", txn_id)

        updated = self._transaction_repo.update(self._from_data(data, txn_id=txn_id))
        if updated is None:
            logger.error(f"Transaction with ID {txn_id} disappeared during update")
            raise NotFoundError("Transaction", txn_id)
        logger.info(f"Transaction updated successfully with ID: {txn_id}")
        return updated

    def delete_transaction(self, txn_id: int) -> None:
        """Delete a transaction by ID."""
        logger.debug(f"Deleting transaction with ID: {txn_id}")
        if not self._transaction_repo.exists_by_id(txn_id):
            logger.error(f"Transaction not found for deletion with ID: {txn_id}")
            raise NotFoundError("Transaction", txn_id)

        if not self._transaction_repo.delete(txn_id):
            logger.error(f"Transaction with ID {txn_id} disappeared during deletion")
            raise NotFoundError("Transaction", txn_id)
        logger.info(f"Transaction deleted successfully with ID: {txn_id}")

    def _list_by_account_and_type(self, account_no: str, tx_type: str) -> list[AccountTransaction]:
        logger.debug(f"Fetching {tx_type.lower()} transactions for account: {account_no}")
        transactions = self._transaction_repo.list_by_account_and_type(account_no, tx_type)
        logger.info(
            f"Retrieved {len(transactions)} {tx_type.lower()} transactions for account: {account_no}"
        )
        return transactions

    @staticmethod
    def _from_data(data: TransactionData, txn_id: Optional[int] = None) -> AccountTransaction:
        return AccountTransaction(
            id=txn_id,
            account_no=data.account_no,
            account_name=data.account_name,
            value_date=data.value_date,
            currency=data.currency,
            tx_type=data.tx_type,
            debit_amt=data.debit_amt,
            credit_amt=data.credit_amt,
            tx_narrative=data.tx_narrative,
        )

    @staticmethod
    def _validate(data: TransactionData) -> None:
        """Validate required transaction fields."""
        required = {
            "Account number": data.account_no,
            "Account name": data.account_name,
            "Currency": data.currency,
            "Transaction type": data.tx_type,
        }
        for label, value in required.items():
            if value is None or not str(value).strip():
                raise ValidationError(f"{label} is required")

        if len(data.currency.strip()) != 3:
            raise ValidationError("Currency must be a 3-letter code")
        if data.value_date is None:
            raise ValidationError("Value date is required")
