"""Account repository protocol."""

from typing import Protocol, Optional

from wholesale.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account and return it with its assigned id."""
        ...

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def get_by_account_no(self, account_no: str) -> Optional[Account]:
        """Retrieve account by account number."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts."""
        ...

    def list_by_type(self, account_type: str) -> list[Account]:
        """List accounts of a given type."""
        ...

    def list_by_currency(self, currency: str) -> list[Account]:
        """List accounts held in a given currency."""
        ...

    def exists_by_id(self, account_id: int) -> bool:
        ...

    def exists_by_account_no(self, account_no: str) -> bool:
        ...

    def update(self, account: Account) -> Optional[Account]:
        """Overwrite an existing account; None if the row is gone."""
        ...

    def delete(self, account_id: int) -> bool:
        """Delete an account (hard delete); False if nothing was deleted."""
        ...
