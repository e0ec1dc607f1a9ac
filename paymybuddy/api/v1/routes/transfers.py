# paymybuddy/api/v1/routes/transfers.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from paymybuddy.api.deps import get_transfer_service
from paymybuddy.core.auth import current_active_user
from paymybuddy.models.user import User
from paymybuddy.schemas.transfer import TransferCreate, TransferRead
from paymybuddy.services.transfer_service import TransferService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transfers", tags=["transfers"])

@router.get("", response_model=List[TransferRead])
async def read_transfers(
    user: User = Depends(current_active_user),
    transfer_service: TransferService = Depends(get_transfer_service),
):
    """Transfers sent or received by the current user, newest first"""
    transfers = await transfer_service.get_transfers(user)
    return [TransferRead.from_transfer(t) for t in transfers]

@router.post("", response_model=TransferRead, status_code=status.HTTP_201_CREATED)
async def create_transfer(
    transfer_in: TransferCreate,
    user: User = Depends(current_active_user),
    transfer_service: TransferService = Depends(get_transfer_service),
):
    """Send money to one of the current user's buddies"""
    sender_email = user.email
    try:
        transfer = await transfer_service.transfer(
            user,
            transfer_in.receiver_email,
            transfer_in.amount,
            transfer_in.description,
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error during transfer from {sender_email}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while saving transfer"
        )
    return TransferRead.from_transfer(transfer)
