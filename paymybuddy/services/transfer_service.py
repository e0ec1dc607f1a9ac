# paymybuddy/services/transfer_service.py
import logging
import uuid
from typing import List, Optional

from paymybuddy.core.exceptions import BuddyNotFoundError, BuddyAlreadyAddedError, InvalidBuddyError
from paymybuddy.crud.transfer import TransferRepository
from paymybuddy.crud.user import UserRepository
from paymybuddy.models.transfer import Transfer
from paymybuddy.models.user import User
from paymybuddy.schemas.user import UserViewModel
from paymybuddy.services.user_service import UserService, to_view_model
from paymybuddy.utils.validation import validate_email_format, parse_amount

logger = logging.getLogger(__name__)


def _same_email(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class TransferService:
    """Buddy connections and money transfers between buddies"""

    def __init__(
        self,
        user_service: UserService,
        user_repository: UserRepository,
        transfer_repository: TransferRepository,
    ):
        self.user_service = user_service
        self.user_repository = user_repository
        self.transfer_repository = transfer_repository

    async def add_buddy(self, user: User, buddy_email: str) -> User:
        validate_email_format(buddy_email)
        if _same_email(user.email, buddy_email):
            raise InvalidBuddyError("You cannot add yourself as a buddy")

        buddy = await self.user_repository.find_by_email(buddy_email)
        if buddy is None:
            raise BuddyNotFoundError(buddy_email)
        if any(b.id == buddy.id for b in user.buddies):
            raise BuddyAlreadyAddedError(buddy_email)

        user.buddies.append(buddy)
        saved = await self.user_repository.save(user)
        logger.info(f"User {user.email} added buddy {buddy.email}")
        return saved

    def get_buddies(self, user: User) -> List[UserViewModel]:
        return [to_view_model(buddy) for buddy in user.buddies]

    async def transfer(
        self,
        sender: User,
        receiver_email: str,
        amount: str,
        description: Optional[str] = None,
    ) -> Transfer:
        validate_email_format(receiver_email)
        value = parse_amount(amount)

        receiver = next((b for b in sender.buddies if _same_email(b.email, receiver_email)), None)
        if receiver is None:
            if await self.user_repository.find_by_email(receiver_email) is None:
                raise BuddyNotFoundError(receiver_email)
            raise InvalidBuddyError(f"{receiver_email} is not one of your buddies")

        # Balances are not checked; a transfer may take the sender below zero
        self.user_service.withdraw(sender, str(value))
        self.user_service.deposit(receiver, str(value))

        transfer = Transfer(
            id=uuid.uuid4(),
            sender_id=sender.id,
            receiver_id=receiver.id,
            sender=sender,
            receiver=receiver,
            amount=value,
            description=description,
        )
        self.transfer_repository.add(transfer)
        try:
            await self.transfer_repository.commit()
        except Exception:
            await self.transfer_repository.rollback()
            raise
        await self.transfer_repository.refresh(transfer)

        logger.info(f"Transfer of {value} from {sender.email} to {receiver.email} completed")
        return transfer

    async def get_transfers(self, user: User) -> List[Transfer]:
        return await self.transfer_repository.find_for_user(user.id)
