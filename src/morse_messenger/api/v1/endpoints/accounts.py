"""Account directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from morse_messenger.schemas.account import AccountResponse
from morse_messenger.services import accounts as account_service

from ..dependencies import CurrentAccountDep, SessionDep

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("/me", response_model=AccountResponse)
def read_current_account(current_account: CurrentAccountDep) -> AccountResponse:
    """Return the authenticated account."""
    return AccountResponse.model_validate(current_account)


@router.get("/", response_model=list[AccountResponse])
def list_accounts(current_account: CurrentAccountDep, db: SessionDep) -> list[AccountResponse]:
    """List every other registered account, ordered by name."""
    accounts = account_service.list_accounts(db, exclude_id=current_account.id)
    return [AccountResponse.model_validate(account) for account in accounts]
