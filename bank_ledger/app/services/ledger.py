from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlmodel import Session

from ..core.errors import OverdraftError
from ..models import AccountModel, AccountView
from .locks import AccountLocks, get_account_locks
from .repository import AccountStore


logger = logging.getLogger(__name__)


class LedgerService:
    """Create, look up, deposit to and withdraw from accounts.

    Deposits and withdrawals on one account number run one at a time: each
    call takes that account's lock, re-reads the row, applies the change and
    commits before letting the next caller in. Nothing is cached between
    calls and errors are never retried here.
    """

    def __init__(
        self,
        session: Session,
        store: Optional[AccountStore] = None,
        locks: Optional[AccountLocks] = None,
    ) -> None:
        self.session = session
        self.store = store or AccountStore(session)
        self.locks = locks or get_account_locks()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    @contextmanager
    def _account_scope(self, account_number: int) -> Iterator[None]:
        with self.locks.hold(account_number):
            try:
                yield
            finally:
                # Releases row locks left by a refused withdrawal or a plain read.
                self.store.rollback()

    def _to_view(self, account: AccountModel) -> AccountView:
        return AccountView.model_validate(account)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(
        self, first_name: str, last_name: str, initial_balance: int
    ) -> AccountView:
        # initial_balance is deliberately unchecked; negative openings are allowed.
        account = self.store.create(first_name, last_name, initial_balance)
        try:
            view = self._to_view(account)
        finally:
            self.store.rollback()
        logger.info(
            "account.created",
            extra={"account_number": view.account_number, "balance": view.balance},
        )
        return view

    def find_account(self, account_number: int) -> AccountView:
        with self._account_scope(account_number):
            return self._to_view(self.store.find(account_number))

    def deposit(self, account_number: int, amount: int) -> None:
        with self._account_scope(account_number):
            account = self.store.find(account_number, for_update=True)
            account.balance += amount
            balance = account.balance
            self.store.commit(account)
        logger.info(
            "account.deposit",
            extra={"account_number": account_number, "amount": amount, "balance": balance},
        )

    def withdraw(self, account_number: int, amount: int) -> None:
        with self._account_scope(account_number):
            account = self.store.find(account_number, for_update=True)
            if amount > account.balance:
                logger.warning(
                    "account.overdraft",
                    extra={
                        "account_number": account_number,
                        "amount": amount,
                        "balance": account.balance,
                    },
                )
                raise OverdraftError(account_number, account.balance, amount)
            account.balance -= amount
            balance = account.balance
            self.store.commit(account)
        logger.info(
            "account.withdraw",
            extra={"account_number": account_number, "amount": amount, "balance": balance},
        )
