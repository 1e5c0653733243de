"""
Accounts endpoints (JSON-file store).
List, get, search by name, create, update, delete.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app.models.account import AccountInDB
from app.schemas.account import Account, AccountSearchResult
from app.schemas.common import ErrorDetail
from app.services.account_service import AccountService, get_account_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])

_NOT_FOUND = {404: {"model": ErrorDetail, "description": "Account not found"}}


def _account_in_db_to_account(record: AccountInDB) -> Account:
    """Transform stored record to the API Account schema (timestamps are not exposed)."""
    return Account(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        email=record.email,
        phone=record.phone,
    )


def _account_to_account_in_db(body: Account) -> AccountInDB:
    """Build a store record from the API body; the repository sets id/timestamps as needed."""
    return AccountInDB(
        id=body.id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        phone=body.phone,
    )


def _account_not_found(account_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Account {account_id} not found",
    )


@router.get(
    "",
    response_model=list[Account],
    summary="List accounts",
)
def list_accounts(
    service: AccountService = Depends(get_account_service),
) -> list[Account]:
    """GET /accounts — every stored account."""
    return [_account_in_db_to_account(a) for a in service.get_all_accounts()]


@router.get(
    "/search",
    response_model=list[AccountSearchResult],
    summary="Search accounts by name",
    description="Exact, case-sensitive match on first name or last name.",
)
def search_accounts(
    name: str = Query(..., description="First name or last name to match"),
    service: AccountService = Depends(get_account_service),
) -> list[AccountSearchResult]:
    """GET /accounts/search?name= — accounts whose first or last name equals name."""
    return service.get_accounts_by_name(name)


@router.get(
    "/{account_id}",
    response_model=Account,
    responses=_NOT_FOUND,
    summary="Get account",
)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """GET /accounts/{id}"""
    account = service.get_account_by_id(account_id)
    if account is None:
        raise _account_not_found(account_id)
    return _account_in_db_to_account(account)


@router.post(
    "",
    response_model=Account,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
)
def create_account(
    body: Account,
    request: Request,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """POST /accounts — id in the body is ignored; Location points at the new account."""
    created = service.create_account(_account_to_account_in_db(body))
    response.headers["Location"] = str(request.url_for("get_account", account_id=created.id))
    return _account_in_db_to_account(created)


@router.put(
    "/{account_id}",
    response_model=Account,
    responses={400: {"model": ErrorDetail, "description": "Path and body id differ"}, **_NOT_FOUND},
    summary="Update account",
)
def update_account(
    account_id: int,
    body: Account,
    service: AccountService = Depends(get_account_service),
) -> Account:
    """PUT /accounts/{id} — full replacement; createdAt is kept by the store."""
    if account_id != body.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID in URL does not match ID in body",
        )
    updated = service.update_account(_account_to_account_in_db(body))
    if updated is None:
        raise _account_not_found(account_id)
    return _account_in_db_to_account(updated)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete account",
)
def delete_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> Response:
    """DELETE /accounts/{id}"""
    if not service.delete_account(account_id):
        raise _account_not_found(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
