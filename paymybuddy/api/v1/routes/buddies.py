# paymybuddy/api/v1/routes/buddies.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from paymybuddy.api.deps import get_transfer_service
from paymybuddy.core.auth import current_active_user
from paymybuddy.models.user import User
from paymybuddy.schemas.transfer import BuddyAdd
from paymybuddy.schemas.user import UserViewModel
from paymybuddy.services.transfer_service import TransferService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/buddies", tags=["buddies"])

@router.get("", response_model=List[UserViewModel])
async def read_buddies(
    user: User = Depends(current_active_user),
    transfer_service: TransferService = Depends(get_transfer_service),
):
    return transfer_service.get_buddies(user)

@router.post("", response_model=List[UserViewModel], status_code=status.HTTP_201_CREATED)
async def add_buddy(
    buddy_in: BuddyAdd,
    user: User = Depends(current_active_user),
    transfer_service: TransferService = Depends(get_transfer_service),
):
    """Connect with another user by email"""
    try:
        user = await transfer_service.add_buddy(user, buddy_in.email)
    except SQLAlchemyError as e:
        logger.error(f"Database error while adding buddy for {user.email}: {str(e)}")
        await transfer_service.user_repository.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while adding buddy"
        )
    return transfer_service.get_buddies(user)
