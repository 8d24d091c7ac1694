from .db import Account as AccountModel
from .schemas import AccountCreate, AccountView, MoneyMovementRequest

__all__ = [
    "AccountCreate",
    "AccountView",
    "MoneyMovementRequest",
    "AccountModel",
]
