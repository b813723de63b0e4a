"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Well-known transaction types. The tx_type column also accepts free text."""

    CREDIT = "Credit"
    DEBIT = "Debit"
