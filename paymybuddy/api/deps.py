# paymybuddy/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from paymybuddy.core.database import get_async_session
from paymybuddy.core.security import PasswordHasher, get_password_hasher
from paymybuddy.crud.transfer import TransferRepository
from paymybuddy.crud.user import UserRepository
from paymybuddy.services.transfer_service import TransferService
from paymybuddy.services.user_service import UserService


def get_user_repository(db: AsyncSession = Depends(get_async_session)) -> UserRepository:
    return UserRepository(db)


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(user_repository, password_hasher)


def get_transfer_service(
    db: AsyncSession = Depends(get_async_session),
    user_repository: UserRepository = Depends(get_user_repository),
    user_service: UserService = Depends(get_user_service),
) -> TransferService:
    return TransferService(user_service, user_repository, TransferRepository(db))
