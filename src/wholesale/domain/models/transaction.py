"""AccountTransaction domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from wholesale.domain.models.enums import TransactionType


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass
class AccountTransaction:
    """
    A single debit or credit posted against an account number.

    The account number is not checked against existing accounts, and
    debit/credit amounts are independent of each other and of ``tx_type``.
    """

    account_no: str
    account_name: str
    value_date: date
    currency: str
    tx_type: str
    debit_amt: Optional[Decimal] = None
    credit_amt: Optional[Decimal] = None
    tx_narrative: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.tx_type, TransactionType):
            self.tx_type = self.tx_type.value
        if self.currency:
            self.currency = self.currency.strip().upper()
        self.debit_amt = _to_decimal(self.debit_amt)
        self.credit_amt = _to_decimal(self.credit_amt)
