# paymybuddy/services/user_service.py
import logging
from decimal import Decimal
from typing import List, Optional

from paymybuddy.core.exceptions import EmailAlreadyUsedError, BuddyNotFoundError
from paymybuddy.core.security import PasswordHasher
from paymybuddy.crud.user import UserRepository
from paymybuddy.models.user import User
from paymybuddy.schemas.user import UserViewModel
from paymybuddy.utils.validation import validate_email_format, parse_amount

logger = logging.getLogger(__name__)


def to_view_model(user: User) -> UserViewModel:
    return UserViewModel(
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        balance=user.balance,
    )


class UserService:
    """
    Account operations: registration, profile updates and balance changes.

    deposit() and withdraw() only mutate the entity; the caller saves it.
    The read-modify-save sequence is not atomic, so two concurrent requests
    on the same account can lose an update.
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def create_user(
        self,
        email: str,
        raw_password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        validate_email_format(email)
        if await self.user_repository.find_by_email(email) is not None:
            logger.warning(f"Registration refused, {email} is already used")
            raise EmailAlreadyUsedError(email)

        user = User(
            email=email.lower(),
            hashed_password=self.password_hasher.encode(raw_password),
            first_name=first_name,
            last_name=last_name,
            balance=Decimal("0.00"),
            is_active=True,
            is_superuser=False,
            is_verified=False,
        )
        saved = await self.user_repository.save(user)
        logger.info(f"User {email} has registered")
        return saved

    async def update_user(self, user: User) -> User:
        validate_email_format(user.email)
        if await self.user_repository.find_by_email(user.email) is None:
            raise BuddyNotFoundError(user.email)
        return await self.user_repository.save(user)

    async def change_password(self, user: User, raw_password: str) -> User:
        user.hashed_password = self.password_hasher.encode(raw_password)
        saved = await self.user_repository.save(user)
        logger.info(f"Password changed for user {user.email}")
        return saved

    def deposit(self, user: User, amount: str) -> None:
        value = parse_amount(amount)
        user.balance = (user.balance or Decimal("0.00")) + value
        logger.info(f"Deposited {value} for user {user.email}")

    def withdraw(self, user: User, amount: str) -> None:
        value = parse_amount(amount)
        user.balance = (user.balance or Decimal("0.00")) - value
        logger.info(f"Withdrew {value} for user {user.email}")

    async def get_users(self) -> List[UserViewModel]:
        users = await self.user_repository.find_all()
        return [to_view_model(user) for user in users]
