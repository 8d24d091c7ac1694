from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_ledger_service
from ..models import AccountCreate, AccountView, MoneyMovementRequest
from ..services import LedgerService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountView, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountView:
    return service.create_account(payload.first_name, payload.last_name, payload.balance)

@router.get("/{account_number}", response_model=AccountView)
def find_account(
    account_number: int,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountView:
    return service.find_account(account_number)

@router.post("/{account_number}/deposit", response_model=AccountView)
def deposit(
    account_number: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountView:
    service.deposit(account_number, payload.amount)
    return service.find_account(account_number)

@router.post("/{account_number}/withdraw", response_model=AccountView)
def withdraw(
    account_number: int,
    payload: MoneyMovementRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountView:
    service.withdraw(account_number, payload.amount)
    return service.find_account(account_number)

__all__ = ["router"]
