"""Smoke tests for domain models and application wiring."""

from datetime import date
from decimal import Decimal

from wholesale.domain.models import Account, AccountTransaction, TransactionType
from wholesale.main import create_app
from wholesale.config.settings import Settings


class TestDomainModels:
    """Test domain model creation."""

    def test_create_account(self):
        account = Account(
            account_no="585309209",
            account_name="SGSavings726",
            account_type="Savings",
            balance_date=date(2018, 11, 8),
            currency="sgd",
            opening_avail_bal=84327.51,
        )
        assert account.id is None
        assert account.currency == "SGD"
        assert account.opening_avail_bal == Decimal("84327.51")

    def test_create_transaction(self):
        txn = AccountTransaction(
            account_no="585309209",
            account_name="SGSavings726",
            value_date=date(2018, 11, 12),
            currency="SGD",
            tx_type=TransactionType.CREDIT,
            credit_amt="9540.98",
        )
        assert txn.tx_type == "Credit"
        assert txn.tx_type == "Credit"
        assert txn.credit_amt == Decimal("9540.98")
        assert txn.debit_amt is None


class TestAppWiring:
    """Test the application factory."""

    def test_routes_are_registered_under_prefix(self):
        """
        GIVEN an app built with a custom API prefix
        WHEN I read its OpenAPI schema
        THEN versioned routes carry the prefix and the legacy route does not
        """
        app = create_app(Settings(database_url="sqlite:///:memory:", api_prefix="/api/v2", _env_file=None))
        paths = set(app.openapi()["paths"])

        assert "/api/v2/accounts" in paths
        assert "/api/v2/accounts/number/{account_no}" in paths
        assert "/api/v2/transactions/account/{account_no}/range" in paths
        assert "/api/accountTransaction/{account_no}" in paths
        assert "/health" in paths
