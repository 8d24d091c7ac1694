from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from ..core.config import get_settings
from ..core.errors import StorageTimeoutError


logger = logging.getLogger(__name__)


class AccountLocks:
    """One mutex per account number; operations on different accounts never contend."""

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout
        self._locks: dict[int, threading.Lock] = {}
        # Callers holding or waiting on each lock; an entry is dropped at zero.
        self._users: dict[int, int] = {}
        self._guard = threading.Lock()

    def _checkout(self, account_number: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(account_number)
            if lock is None:
                lock = self._locks[account_number] = threading.Lock()
            self._users[account_number] = self._users.get(account_number, 0) + 1
            return lock

    def _checkin(self, account_number: int) -> None:
        with self._guard:
            remaining = self._users[account_number] - 1
            if remaining:
                self._users[account_number] = remaining
            else:
                del self._users[account_number]
                del self._locks[account_number]

    def active_count(self) -> int:
        """Account numbers currently held or waited on."""
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, account_number: int) -> Iterator[None]:
        lock = self._checkout(account_number)
        try:
            if not lock.acquire(timeout=self.timeout):
                logger.warning(
                    "account.lock.timeout",
                    extra={"account_number": account_number, "timeout": self.timeout},
                )
                raise StorageTimeoutError(
                    f"Timed out after {self.timeout}s waiting for account {account_number}"
                )
            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(account_number)


@lru_cache(maxsize=1)
def get_account_locks() -> AccountLocks:
    return AccountLocks(timeout=get_settings().lock_timeout_seconds)
