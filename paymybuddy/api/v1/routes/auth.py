# paymybuddy/api/v1/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from paymybuddy.api.deps import get_user_service
from paymybuddy.schemas.user import UserCreate, UserViewModel
from paymybuddy.services.user_service import UserService, to_view_model

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

@router.post("/register", response_model=UserViewModel, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """Create an account with a zero balance"""
    try:
        user = await user_service.create_user(
            user_in.email,
            user_in.password,
            first_name=user_in.first_name,
            last_name=user_in.last_name,
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error during registration of {user_in.email}: {str(e)}")
        await user_service.user_repository.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database error occurred while creating account"
        )
    return to_view_model(user)
