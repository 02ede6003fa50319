"""Statistics routes."""
from dataclasses import asdict

from fastapi import APIRouter, Depends

from closet.api.deps import get_current_identity, get_db
from closet.domain.common.types import CamelModel, Identity
from closet.domain.market.services import StatsService
from closet.infra.db.session import Database

router = APIRouter()


class StatsResponse(CamelModel):
    """Seller and buyer totals for the caller."""
    buttons: int
    active_listings: int
    sold_items: int
    total_sales: int
    total_purchases: int
    total_earned: int
    total_spent: int
    total_views: int
    total_likes: int


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Get the caller's marketplace statistics."""
    return StatsResponse(**asdict(StatsService(db).stats(current_user.id)))
