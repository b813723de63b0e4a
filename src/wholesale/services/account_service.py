"""Account service: uniqueness and existence rules around the account store."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from wholesale.core.exceptions import ValidationError, NotFoundError, DuplicateKeyError
from wholesale.domain.models import Account
from wholesale.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class AccountData:
    """Input data for creating or replacing an account."""

    account_no: str
    account_name: str
    account_type: str
    balance_date: date
    currency: str
    opening_avail_bal: Decimal


class AccountService:
    """
    Service for managing accounts.

    Enforces account number uniqueness on create and existence before
    update/delete. Every outcome is logged.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        logger.info("Fetching all accounts")
        accounts = self._account_repo.list_all()
        logger.debug(f"Found {len(accounts)} accounts")
        return accounts

    def get_account(self, account_id: int) -> Account:
        """Get account by ID."""
        logger.info(f"Fetching account with ID: {account_id}")
        account = self._account_repo.get_by_id(account_id)
        if not account:
            logger.warning(f"Account with ID {account_id} not found")
            raise NotFoundError("Account", account_id)
        return account

    def get_account_by_number(self, account_no: str) -> Account:
        """Get account by its account number."""
        logger.info(f"Fetching account with account number: {account_no}")
        account = self._account_repo.get_by_account_no(account_no)
        if not account:
            logger.warning(f"Account with number {account_no} not found")
            raise NotFoundError("Account", account_no)
        return account

    def list_accounts_by_type(self, account_type: str) -> list[Account]:
        logger.info(f"Fetching accounts of type: {account_type}")
        accounts = self._account_repo.list_by_type(account_type)
        logger.debug(f"Found {len(accounts)} accounts of type {account_type}")
        return accounts

    def list_accounts_by_currency(self, currency: str) -> list[Account]:
        logger.info(f"Fetching accounts in currency: {currency}")
        accounts = self._account_repo.list_by_currency(currency)
        logger.debug(f"Found {len(accounts)} accounts in {currency}")
        return accounts

    def create_account(self, data: AccountData) -> Account:
        """
        Create a new account.

        Raises:
            ValidationError: a required field is missing or blank.
            DuplicateKeyError: the account number is already in use.
        """
        self._validate(data)
        logger.info(f"Creating new account: {data.account_no}")

        if self._account_repo.exists_by_account_no(data.account_no):
            logger.error(f"Account with number {data.account_no} already exists")
            raise DuplicateKeyError("Account", data.account_no)

        account = Account(
            account_no=data.account_no,
            account_name=data.account_name,
            account_type=data.account_type,
            balance_date=data.balance_date,
            currency=data.currency,
            opening_avail_bal=data.opening_avail_bal,
        )
        # The unique constraint still guards a concurrent insert of the same number
        created = self._account_repo.create(account)
        logger.info(f"Successfully created account with ID: {created.id}")
        return created

    def update_account(self, account_id: int, data: AccountData) -> Account:
        """
        Overwrite the mutable fields of an account.

        The id and account number are preserved; ``data.account_no`` is ignored.
        """
        self._validate(data, require_account_no=False)
        logger.info(f"Updating account with ID: {account_id}")

        existing = self._account_repo.get_by_id(account_id)
        if not existing:
            logger.error(f"Account with ID {account_id} not found for update")
            raise NotFoundError("Account", account_id)

        existing.account_name = data.account_name
        existing.account_type = data.account_type
        existing.balance_date = data.balance_date
        existing.currency = data.currency.strip().upper()
        existing.opening_avail_bal = data.opening_avail_bal

        updated = self._account_repo.update(existing)
        if updated is None:
            # Deleted between the existence check and the write
            logger.error(f"Account with ID {account_id} disappeared during update")
            raise NotFoundError("Account", account_id)
        logger.info(f"Successfully updated account: {updated.account_no}")
        return updated

    def delete_account(self, account_id: int) -> None:
        """Delete account by ID."""
        logger.info(f"Deleting account with ID: {account_id}")
        if not self._account_repo.exists_by_id(account_id):
            logger.error(f"Account with ID {account_id} not found for deletion")
            raise NotFoundError("Account", account_id)

        if not self._account_repo.delete(account_id):
            logger.error(f"Account with ID {account_id} disappeared during deletion")
            raise NotFoundError("Account", account_id)
        logger.info(f"Successfully deleted account with ID: {account_id}")

    @staticmethod
    def _validate(data: AccountData, require_account_no: bool = True) -> None:
        """Validate required account fields."""
        required = {
            "Account name": data.account_name,
            "Account type": data.account_type,
            "Currency": data.currency,
        }
        if require_account_no:
            required = {"Account number": data.account_no, **required}

        for label, value in required.items():
            if value is None or not str(value).strip():
                raise ValidationError(f"{label} is required")

        if len(data.currency.strip()) != 3:
            raise ValidationError("Currency must be a 3-letter code")
        if data.balance_date is None:
            raise ValidationError("Balance date is required")
        if data.opening_avail_bal is None:
            raise ValidationError("Opening available balance is required")
