# paymybuddy/schemas/user.py
from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, Field

# Read-only projection used for listing and display
class UserViewModel(BaseModel):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    balance: Optional[Decimal] = None

    class Config:
        from_attributes = True

# Fields accepted on POST /auth/register
class UserCreate(BaseModel):
    # Format is checked by UserService so the error type stays the same for every caller
    email: str
    password: str = Field(..., min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None

# Fields accepted on PATCH /users/me
class UserUpdate(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    password: Optional[str] = None

class AmountRequest(BaseModel):
    amount: str = Field(..., description="Decimal amount, e.g. 490.44")
