"""Social API routes."""
from fastapi import APIRouter

from closet.api.social import routes_favorites, routes_messages

router = APIRouter()

router.include_router(routes_favorites.router, prefix="/favorites", tags=["favorites"])
router.include_router(routes_messages.router, prefix="/messages", tags=["messages"])
