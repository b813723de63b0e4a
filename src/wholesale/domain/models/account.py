"""Account domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class Account:
    """
    Account balance view.

    The account number is the secondary key and is unique across all
    accounts. ``id`` is assigned by the store on insert.
    """

    account_no: str
    account_name: str
    account_type: str
    balance_date: date
    currency: str
    opening_avail_bal: Decimal
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.opening_avail_bal, (int, float, str)):
            self.opening_avail_bal = Decimal(str(self.opening_avail_bal))
        if self.currency:
            self.currency = self.currency.strip().upper()
