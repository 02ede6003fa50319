"""User routes."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from closet.api.deps import get_current_identity, get_db
from closet.api.schemas import DressListResponse, DressResponse
from closet.domain.admin.services import UserService
from closet.domain.common.types import CamelModel, Identity
from closet.domain.market.services import ListingService
from closet.infra.db.session import Database

router = APIRouter()


class PublicProfileResponse(CamelModel):
    """Public user profile response model."""
    id: int
    username: str
    avatar: Optional[str] = None
    bio: str
    buttons: int
    followers: int
    following: int
    created_at: datetime
    dress_count: int


class UpdateProfileRequest(CamelModel):
    """Update profile request."""
    username: Optional[str] = None
    bio: Optional[str] = None


class ProfileSummary(CamelModel):
    id: int
    username: str
    bio: str
    buttons: int


class UpdateProfileResponse(CamelModel):
    message: str
    user: ProfileSummary


@router.get("/me/dresses", response_model=DressListResponse)
async def get_my_dresses(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Every listing the caller owns, sold ones included."""
    listings = ListingService(db).list_for_seller(current_user.id)
    return DressListResponse(dresses=[DressResponse.from_listing(d) for d in listings])


@router.put("/profile", response_model=UpdateProfileResponse)
def update_profile(
    request: UpdateProfileRequest,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Update username and/or bio."""
    user = UserService(db).update_profile(
        current_user.id,
        username=request.username,
        bio=request.bio,
    )
    return UpdateProfileResponse(
        message="Profile updated",
        user=ProfileSummary(id=user.id, username=user.username, bio=user.bio, buttons=user.buttons),
    )


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def get_user_profile(user_id: int, db: Database = Depends(get_db)):
    """Public profile plus the number of listings currently for sale."""
    profile = UserService(db).get_public_profile(user_id)
    user = profile.user
    return PublicProfileResponse(
        id=user.id,
        username=user.username,
        avatar=user.avatar,
        bio=user.bio,
        buttons=user.buttons,
        followers=user.followers,
        following=user.following,
        created_at=user.created_at,
        dress_count=profile.dress_count,
    )
