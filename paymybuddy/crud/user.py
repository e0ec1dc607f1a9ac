# paymybuddy/crud/user.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import func
from paymybuddy.models.user import User
from typing import Optional, List
import uuid

async def get_user_by_email(email: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(func.lower(User.email) == func.lower(email)))
    return result.scalar_one_or_none()

async def get_user_by_id(user_id: uuid.UUID, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()

async def get_all_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.email))
    return result.scalars().all()

async def save_user(user: User, db: AsyncSession) -> User:
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


class UserRepository:
    """Persistence for User entities bound to one AsyncSession"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        return await get_user_by_email(email, self.db)

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return await get_user_by_id(user_id, self.db)

    async def find_all(self) -> List[User]:
        return await get_all_users(self.db)

    async def save(self, user: User) -> User:
        return await save_user(user, self.db)

    async def rollback(self) -> None:
        await self.db.rollback()
