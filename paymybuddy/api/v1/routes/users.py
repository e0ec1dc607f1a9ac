# paymybuddy/api/v1/routes/users.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from paymybuddy.api.deps import get_user_service
from paymybuddy.core.auth import current_active_user
from paymybuddy.core.exceptions import EmailAlreadyUsedError
from paymybuddy.models.user import User
from paymybuddy.schemas.user import UserViewModel, UserUpdate, AmountRequest
from paymybuddy.services.user_service import UserService, to_view_model
from paymybuddy.utils.validation import validate_email_format

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User Management"])

# 1) GET /users
@router.get("", response_model=List[UserViewModel])
async def list_users(
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
):
    """List every account with its balance"""
    try:
        return await user_service.get_users()
    except SQLAlchemyError as e:
        logger.error(f"Database error while listing users: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while fetching users"
        )

# 2) GET /users/me
@router.get("/me", response_model=UserViewModel)
async def read_own_profile(user: User = Depends(current_active_user)):
    return to_view_model(user)

# 3) PATCH /users/me
@router.patch("/me", response_model=UserViewModel)
async def update_own_profile(
    user_update: UserUpdate,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
):
    """Update current user's profile"""
    update_dict = user_update.model_dump(exclude_unset=True)
    if not update_dict:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields provided for update"
        )

    new_email = update_dict.pop("email", None)
    new_password = update_dict.pop("password", None)
    try:
        if new_email is not None and new_email.lower() != user.email.lower():
            validate_email_format(new_email)
            if await user_service.user_repository.find_by_email(new_email) is not None:
                raise EmailAlreadyUsedError(new_email)
            user.email = new_email.lower()

        for field, value in update_dict.items():
            setattr(user, field, value)

        updated_user = await user_service.update_user(user)
        if new_password:
            updated_user = await user_service.change_password(updated_user, new_password)
        return to_view_model(updated_user)

    except SQLAlchemyError as e:
        logger.error(f"Database error while updating {user.email}: {str(e)}")
        await user_service.user_repository.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while updating profile"
        )

# 4) POST /users/me/deposit
@router.post("/me/deposit", response_model=UserViewModel)
async def deposit(
    payload: AmountRequest,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
):
    """Add money to the current user's balance"""
    user_service.deposit(user, payload.amount)
    try:
        saved = await user_service.user_repository.save(user)
    except SQLAlchemyError as e:
        logger.error(f"Database error during deposit for {user.email}: {str(e)}")
        await user_service.user_repository.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while saving deposit"
        )
    return to_view_model(saved)

# 5) POST /users/me/withdraw
@router.post("/me/withdraw", response_model=UserViewModel)
async def withdraw(
    payload: AmountRequest,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
):
    """Take money out of the current user's balance"""
    user_service.withdraw(user, payload.amount)
    try:
        saved = await user_service.user_repository.save(user)
    except SQLAlchemyError as e:
        logger.error(f"Database error during withdrawal for {user.email}: {str(e)}")
        await user_service.user_repository.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while saving withdrawal"
        )
    return to_view_model(saved)
