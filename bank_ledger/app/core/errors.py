class LedgerError(Exception):
    """Base class for every error the ledger raises."""


class AccountNotFoundError(LedgerError):
    """Raised when an account number has no backing record."""

    def __init__(self, account_number: int) -> None:
        super().__init__(f"No account with number {account_number}")
        self.account_number = account_number


class OverdraftError(LedgerError):
    """Raised when a withdrawal would drop the balance below zero."""

    def __init__(self, account_number: int, balance: int, amount: int) -> None:
        super().__init__(f"Overdraft attempt, balance: {balance}, amount: {amount}")
        self.account_number = account_number
        self.balance = balance
        self.amount = amount


class StorageError(LedgerError):
    """The persistence medium could not complete the operation."""


class StorageUnavailableError(StorageError):
    """Raised when the database cannot be reached. Safe to retry."""


class StorageTimeoutError(StorageUnavailableError):
    """Raised when waiting on an account lock or a connection timed out."""


class StorageIOError(StorageError):
    """Raised when the database rejected or failed a statement."""
