# paymybuddy/schemas/transfer.py
from typing import Optional
from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, Field
import uuid

class BuddyAdd(BaseModel):
    email: str

class TransferCreate(BaseModel):
    receiver_email: str
    amount: str = Field(..., description="Decimal amount, e.g. 25.00")
    description: Optional[str] = Field(None, max_length=255)

class TransferRead(BaseModel):
    id: uuid.UUID
    sender_email: str
    receiver_email: str
    amount: Decimal
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_transfer(cls, transfer) -> "TransferRead":
        return cls(
            id=transfer.id,
            sender_email=transfer.sender.email,
            receiver_email=transfer.receiver.email,
            amount=transfer.amount,
            description=transfer.description,
            created_at=transfer.created_at,
        )
