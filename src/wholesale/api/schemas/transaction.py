"""Pydantic schemas for transaction endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from wholesale.services import TransactionData


class TransactionRequest(BaseModel):
    """Request schema for creating or replacing a transaction."""

    account_no: str = Field(..., min_length=1, max_length=20, description="Account number")
    account_name: str = Field(..., min_length=1, max_length=100, description="Account name")
    value_date: date = Field(..., description="Value date (YYYY-MM-DD)")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO currency code")
    debit_amt: Optional[Decimal] = Field(default=None, max_digits=15, decimal_places=2)
    credit_amt: Optional[Decimal] = Field(default=None, max_digits=15, decimal_places=2)
    tx_type: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Credit, Debit or free text",
    )
    tx_narrative: Optional[str] = Field(default=None, max_length=500)

    @field_validator("currency")
    @classmethod
    def uppercase_currency(cls, v: str) -> str:
        return v.upper()

    def to_data(self) -> TransactionData:
        return TransactionData(
            account_no=self.account_no,
            account_name=self.account_name,
            value_date=self.value_date,
            currency=self.currency,
            tx_type=self.tx_type,
            debit_amt=self.debit_amt,
            credit_amt=self.credit_amt,
            tx_narrative=self.tx_narrative,
        )


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: int
    account_no: str
    account_name: str
    value_date: date
    currency: str
    debit_amt: Optional[Decimal] = None
    credit_amt: Optional[Decimal] = None
    tx_type: str
    tx_narrative: Optional[str] = None
