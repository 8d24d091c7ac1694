from .ledger import LedgerService
from .locks import AccountLocks, get_account_locks
from .repository import AccountStore

__all__ = ["AccountLocks", "AccountStore", "LedgerService", "get_account_locks"]
