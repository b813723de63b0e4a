"""Account transaction endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from wholesale.api.deps import get_transaction_service
from wholesale.api.schemas import TransactionRequest, TransactionResponse
from wholesale.core.exceptions import NotFoundError, ValidationError
from wholesale.services import AccountTransactionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])

# Pre-versioned path kept for existing clients
legacy_router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("", response_model=list[TransactionResponse])
def list_transactions(svc: AccountTransactionService = Depends(get_transaction_service)):
    """Retrieve all account transactions."""
    logger.info("REST request to get all transactions")
    return svc.list_transactions()


@router.get("/account/{account_no}", response_model=list[TransactionResponse])
def get_transactions_by_account(
    account_no: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve all transactions for an account number (possibly empty)."""
    logger.info(f"REST request to get transactions for account: {account_no}")
    return svc.list_by_account(account_no)


@router.get("/account/{account_no}/range", response_model=list[TransactionResponse])
def get_transactions_by_date_range(
    account_no: str,
    start_date: date = Query(..., alias="startDate", description="First value date (inclusive)"),
    end_date: date = Query(..., alias="endDate", description="Last value date (inclusive)"),
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve an account's transactions within a value date range."""
    logger.info(
        f"REST request to get transactions for account: {account_no} "
        f"between {start_date} and {end_date}"
    )
    try:
        return svc.list_by_date_range(account_no, start_date, end_date)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/account/{account_no}/credit", response_model=list[TransactionResponse])
def get_credit_transactions(
    account_no: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve credit transactions for an account."""
    logger.info(f"REST request to get credit transactions for account: {account_no}")
    return svc.list_credit_transactions(account_no)


@router.get("/account/{account_no}/debit", response_model=list[TransactionResponse])
def get_debit_transactions(
    account_no: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve debit transactions for an account."""
    logger.info(f"REST request to get debit transactions for account: {account_no}")
    return svc.list_debit_transactions(account_no)


@router.get("/type/{tx_type}", response_model=list[TransactionResponse])
def get_transactions_by_type(
    tx_type: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    logger.info(f"REST request to get transactions of type: {tx_type}")
    return svc.list_by_type(tx_type)


@router.get("/currency/{currency}", response_model=list[TransactionResponse])
def get_transactions_by_currency(
    currency: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    logger.info(f"REST request to get transactions in currency: {currency}")
    return svc.list_by_currency(currency)


@router.get("/{txn_id}", response_model=TransactionResponse)
def get_transaction(
    txn_id: int,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve a specific transaction by its ID."""
    logger.info(f"REST request to get transaction with ID: {txn_id}")
    try:
        return svc.get_transaction(txn_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    data: TransactionRequest,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Create a new account transaction."""
    logger.info(f"REST request to create transaction for account: {data.account_no}")
    try:
        return svc.create_transaction(data.to_data())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/{txn_id}", response_model=TransactionResponse)
def update_transaction(
    txn_id: int,
    data: TransactionRequest,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Replace an existing account transaction."""
    logger.info(f"REST request to update transaction with ID: {txn_id}")
    try:
        return svc.update_transaction(txn_id, data.to_data())
    except NotFoundError as e:
        logger.error(f"Transaction not found: {e.message}")
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/{txn_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    txn_id: int,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Delete an existing account transaction."""
    logger.info(f"REST request to delete transaction with ID: {txn_id}")
    try:
        svc.delete_transaction(txn_id)
    except NotFoundError as e:
        logger.error(f"Transaction not found: {e.message}")
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@legacy_router.get("/accountTransaction/{account_no}", response_model=list[TransactionResponse])
def get_account_transaction_legacy(
    account_no: str,
    svc: AccountTransactionService = Depends(get_transaction_service),
):
    """Retrieve an account's transactions; 404 when there are none."""
    logger.info(f"REST request to get transactions for account: {account_no}")
    transactions = svc.list_by_account(account_no)
    if not transactions:
        logger.warning(f"No transactions found for account: {account_no}")
        raise HTTPException(
            status_code=404,
            detail=f"No transactions found for account: {account_no}",
        )
    return transactions
