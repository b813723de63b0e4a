"""Account endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from wholesale.api.deps import get_account_service
from wholesale.api.schemas import AccountCreateRequest, AccountUpdateRequest, AccountResponse
from wholesale.core.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from wholesale.services import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(svc: AccountService = Depends(get_account_service)):
    """Retrieve all accounts."""
    logger.info("GET /accounts - Retrieving all accounts")
    return svc.list_accounts()


@router.get("/number/{account_no}", response_model=AccountResponse)
@router.get("/byNumber/{account_no}", response_model=AccountResponse, include_in_schema=False)
def get_account_by_number(account_no: str, svc: AccountService = Depends(get_account_service)):
    """Retrieve a specific account by its account number."""
    logger.info(f"GET /accounts/number/{account_no} - Retrieving account by account number")
    try:
        return svc.get_account_by_number(account_no)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/type/{account_type}", response_model=list[AccountResponse])
def get_accounts_by_type(account_type: str, svc: AccountService = Depends(get_account_service)):
    """Retrieve all accounts of a specific type."""
    logger.info(f"GET /accounts/type/{account_type} - Retrieving accounts by type")
    return svc.list_accounts_by_type(account_type)


@router.get("/currency/{currency}", response_model=list[AccountResponse])
def get_accounts_by_currency(currency: str, svc: AccountService = Depends(get_account_service)):
    """Retrieve all accounts in a specific currency."""
    logger.info(f"GET /accounts/currency/{currency} - Retrieving accounts by currency")
    return svc.list_accounts_by_currency(currency)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: int, svc: AccountService = Depends(get_account_service)):
    """Retrieve a specific account by its ID."""
    logger.info(f"GET /accounts/{account_id} - Retrieving account by ID")
    try:
        return svc.get_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(data: AccountCreateRequest, svc: AccountService = Depends(get_account_service)):
    """Create a new account. The account number must not be in use."""
    logger.info(f"POST /accounts - Creating new account: {data.account_no}")
    try:
        return svc.create_account(data.to_data())
    except (DuplicateKeyError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    data: AccountUpdateRequest,
    svc: AccountService = Depends(get_account_service),
):
    """Update an existing account. The account number cannot be changed."""
    logger.info(f"PUT /accounts/{account_id} - Updating account")
    try:
        return svc.update_account(account_id, data.to_data())
    except NotFoundError as e:
        logger.error(f"Error updating account: {e.message}")
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(account_id: int, svc: AccountService = Depends(get_account_service)):
    """Delete an account."""
    logger.info(f"DELETE /accounts/{account_id} - Deleting account")
    try:
        svc.delete_account(account_id)
    except NotFoundError as e:
        logger.error(f"Error deleting account: {e.message}")
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
