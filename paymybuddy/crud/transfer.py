# paymybuddy/crud/transfer.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc, or_
from paymybuddy.models.transfer import Transfer
from typing import List
import uuid

async def get_transfers_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Transfer]:
    """Transfers sent or received by the user, newest first"""
    result = await db.execute(
        select(Transfer)
        .where(or_(Transfer.sender_id == user_id, Transfer.receiver_id == user_id))
        .order_by(desc(Transfer.created_at))
    )
    return result.unique().scalars().all()


class TransferRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def add(self, transfer: Transfer) -> None:
        self.db.add(transfer)

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    async def refresh(self, instance) -> None:
        await self.db.refresh(instance)

    async def find_for_user(self, user_id: uuid.UUID) -> List[Transfer]:
        return await get_transfers_for_user(user_id, self.db)
