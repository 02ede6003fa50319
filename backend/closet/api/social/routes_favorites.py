"""Favorite routes."""
from fastapi import APIRouter, Depends

from closet.api.deps import get_current_identity, get_db
from closet.api.schemas import DressResponse, MessageResult
from closet.domain.common.types import CamelModel, Identity
from closet.domain.social.services import FavoriteService
from closet.infra.db.session import Database

router = APIRouter()


class FavoritesResponse(CamelModel):
    favorites: list[DressResponse]


@router.get("", response_model=FavoritesResponse)
async def list_favorites(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """The caller's favorited dresses. Deleted dresses are left out."""
    views = FavoriteService(db).list_favorites(current_user.id)
    return FavoritesResponse(favorites=[DressResponse.from_view(v) for v in views])


@router.post("/{dress_id}", response_model=MessageResult)
def add_favorite(
    dress_id: int,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    FavoriteService(db).add_favorite(current_user.id, dress_id)
    return MessageResult(message="Added to favorites")


@router.delete("/{dress_id}", response_model=MessageResult)
def remove_favorite(
    dress_id: int,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    FavoriteService(db).remove_favorite(current_user.id, dress_id)
    return MessageResult(message="Removed from favorites")
