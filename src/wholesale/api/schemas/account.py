"""Pydantic schemas for account endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from wholesale.services import AccountData


class AccountUpdateRequest(BaseModel):
    """Request schema for replacing an account's mutable fields."""

    account_no: Optional[str] = Field(
        default=None,
        max_length=20,
        description="Ignored on update; the stored account number is kept",
    )
    account_name: str = Field(..., min_length=1, max_length=100, description="Account name")
    account_type: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Account type, e.g. Savings or Current",
    )
    balance_date: date = Field(..., description="Balance date (YYYY-MM-DD)")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO currency code")
    opening_avail_bal: Decimal = Field(
        ...,
        max_digits=15,
        decimal_places=2,
        description="Opening available balance",
    )

    @field_validator("currency")
    @classmethod
    def uppercase_currency(cls, v: str) -> str:
        return v.upper()

    def to_data(self, account_no: str = "") -> AccountData:
        return AccountData(
            account_no=self.account_no or account_no,
            account_name=self.account_name,
            account_type=self.account_type,
            balance_date=self.balance_date,
            currency=self.currency,
            opening_avail_bal=self.opening_avail_bal,
        )


class AccountCreateRequest(AccountUpdateRequest):
    """Request schema for creating an account."""

    account_no: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Unique account number",
    )


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    id: int
    account_no: str
    account_name: str
    account_type: str
    balance_date: date
    currency: str
    opening_avail_bal: Decimal
