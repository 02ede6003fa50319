"""Account API routes."""
from fastapi import APIRouter

from closet.api.admin import routes_auth, routes_users

router = APIRouter()

router.include_router(routes_auth.router, prefix="/auth", tags=["auth"])
router.include_router(routes_users.router, prefix="/users", tags=["users"])
