from fastapi import APIRouter

from paymybuddy.core.auth import fastapi_users, auth_backend
from paymybuddy.api.v1.routes import users, auth, buddies, transfers

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(fastapi_users.get_auth_router(auth_backend), prefix="/auth/jwt", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["User Management"])
api_router.include_router(buddies.router)
api_router.include_router(transfers.router)
