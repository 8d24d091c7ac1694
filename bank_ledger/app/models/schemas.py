from pydantic import BaseModel, ConfigDict, Field


class AccountCreate(BaseModel):
    first_name: str = Field(..., description="Holder's first name")
    last_name: str = Field(..., description="Holder's last name")
    balance: int = Field(default=0, description="Initial balance in whole currency units")


class AccountView(BaseModel):
    """Read-only snapshot of an account, safe to hand out after the session closes."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    account_number: int
    first_name: str
    last_name: str
    balance: int


class MoneyMovementRequest(BaseModel):
    # Unbounded on purpose: a negative deposit reduces the balance.
    amount: int = Field(..., description="Amount in whole currency units")
