from fastapi import Depends
from sqlmodel import Session

from ..services import AccountLocks, AccountStore, LedgerService, get_account_locks
from .db import get_session


def get_ledger_service(
    session: Session = Depends(get_session),
    locks: AccountLocks = Depends(get_account_locks),
) -> LedgerService:
    return LedgerService(session, AccountStore(session), locks)
