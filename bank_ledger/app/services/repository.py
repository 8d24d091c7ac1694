from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session

from ..core.errors import (
    AccountNotFoundError,
    StorageIOError,
    StorageTimeoutError,
    StorageUnavailableError,
)
from ..models import AccountModel


class AccountStore:
    """Keyed access to account rows through a single SQLModel session.

    Every call runs inside a translation scope: SQLAlchemy failures roll the
    session back and surface as ledger storage errors, so callers never see a
    half-applied update or a driver-specific exception.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _storage_errors(self, account_number: int | None = None) -> Iterator[None]:
        try:
            yield
        except StaleDataError as exc:
            self.session.rollback()
            raise AccountNotFoundError(account_number) from exc
        except sa_exc.TimeoutError as exc:
            self.session.rollback()
            raise StorageTimeoutError(str(exc)) from exc
        except (sa_exc.OperationalError, sa_exc.DisconnectionError) as exc:
            self.session.rollback()
            raise StorageUnavailableError(str(exc)) from exc
        except (OverflowError, sa_exc.DataError) as exc:
            # Value the column type cannot hold; the driver raises this unwrapped.
            self.session.rollback()
            raise StorageIOError(str(exc)) from exc
        except sa_exc.SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageIOError(str(exc)) from exc

    def create(self, first_name: str, last_name: str, balance: int) -> AccountModel:
        account = AccountModel(first_name=first_name, last_name=last_name, balance=balance)
        with self._storage_errors():
            self.session.add(account)
            self.session.commit()
            self.session.refresh(account)
        return account

    def find(self, account_number: int, *, for_update: bool = False) -> AccountModel:
        with self._storage_errors(account_number):
            account = self.session.get(
                AccountModel,
                account_number,
                populate_existing=True,
                with_for_update=for_update or None,
            )
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def commit(self, account: AccountModel) -> None:
        with self._storage_errors(account.account_number):
            self.session.add(account)
            self.session.commit()

    def rollback(self) -> None:
        # No-op when the last call already committed.
        self.session.rollback()
