from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class Account(SQLModel, table=True):
    account_number: Optional[int] = Field(default=None, primary_key=True)
    # No ge=0 here: accounts may be opened with a negative balance.
    balance: int = 0
    first_name: str
    last_name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        if self.account_number is None or other.account_number is None:
            return self is other
        return self.account_number == other.account_number

    def __hash__(self) -> int:
        if self.account_number is None:
            return id(self)
        return hash(self.account_number)

    def __repr__(self) -> str:
        return f"Account[account_number={self.account_number}]"
