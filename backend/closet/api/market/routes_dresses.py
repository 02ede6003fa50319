"""Dress listing routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import Field

from closet.api.deps import get_current_identity, get_db
from closet.api.schemas import (
    DressDetailResponse,
    DressListResponse,
    DressResponse,
    MessageResult,
)
from closet.domain.common.types import CamelModel, Identity
from closet.domain.market.models import ListingFilters
from closet.domain.market.services import ListingService
from closet.infra.db.session import Database
from closet.settings import settings

router = APIRouter()


class DressSearchResponse(CamelModel):
    """Browse response."""
    total: int
    dresses: list[DressResponse]


class CreateDressRequest(CamelModel):
    """Create dress request."""
    brand: str
    title: str
    buttons_price: int = Field(ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    condition: Optional[str] = None
    original_price: Optional[int] = Field(default=None, ge=0)
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None


class UpdateDressRequest(CamelModel):
    """Update dress request. Only fields that are sent are changed."""
    brand: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    condition: Optional[str] = None
    buttons_price: Optional[int] = Field(default=None, ge=0)
    original_price: Optional[int] = Field(default=None, ge=0)
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None


class DressMutationResponse(CamelModel):
    message: str
    dress: DressResponse


@router.get("", response_model=DressSearchResponse)
async def search_dresses(
    category: Optional[str] = None,
    min_buttons: Optional[int] = Query(default=None, alias="minButtons"),
    max_buttons: Optional[int] = Query(default=None, alias="maxButtons"),
    size: Optional[str] = None,
    condition: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
    db: Database = Depends(get_db),
):
    """Available dresses matching the filters, with a seller summary each."""
    filters = ListingFilters(
        category=category,
        min_buttons=min_buttons,
        max_buttons=max_buttons,
        size=size,
        condition=condition,
        search=search,
        sort=sort,
    )
    views = ListingService(db).browse(filters)
    return DressSearchResponse(total=len(views), dresses=[DressResponse.from_view(v) for v in views])


# The feeds must be declared before /{dress_id} or they would never match.
@router.get("/trending", response_model=DressListResponse)
async def trending_dresses(db: Database = Depends(get_db)):
    """Top available dresses by likes + 0.1 * views."""
    views = ListingService(db, feed_limit=settings.feed_limit).trending()
    return DressListResponse(dresses=[DressResponse.from_view(v) for v in views])


@router.get("/new", response_model=DressListResponse)
async def new_dresses(db: Database = Depends(get_db)):
    """Most recently listed available dresses."""
    views = ListingService(db, feed_limit=settings.feed_limit).new_arrivals()
    return DressListResponse(dresses=[DressResponse.from_view(v) for v in views])


# Handlers that take the store lock are plain ``def`` and run in the threadpool.
@router.get("/{dress_id}", response_model=DressDetailResponse)
def get_dress(dress_id: int, db: Database = Depends(get_db)):
    """Dress detail. Counts a view on every call."""
    view = ListingService(db).view_listing(dress_id)
    return DressDetailResponse.from_view(view)


@router.post("", response_model=DressMutationResponse)
def create_dress(
    request: CreateDressRequest,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """List a dress for sale, owned by the caller."""
    listing = ListingService(db).create_listing(current_user.id, **request.model_dump())
    return DressMutationResponse(message="Dress listed successfully", dress=DressResponse.from_listing(listing))


@router.put("/{dress_id}", response_model=DressMutationResponse)
def update_dress(
    dress_id: int,
    request: UpdateDressRequest,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Owner-only partial update."""
    listing = ListingService(db).update_listing(
        dress_id, current_user.id, request.model_dump(exclude_none=True)
    )
    return DressMutationResponse(message="Dress updated", dress=DressResponse.from_listing(listing))


@router.delete("/{dress_id}", response_model=MessageResult)
def delete_dress(
    dress_id: int,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Owner-only delete."""
    ListingService(db).delete_listing(dress_id, current_user.id)
    return MessageResult(message="Dress deleted")
