from fastapi import APIRouter

from usermanagement.modules.users.router import router as users_router

web_router = APIRouter()

web_router.include_router(users_router, tags=["Sign-Up"])
