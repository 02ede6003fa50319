"""Market API routes."""
from fastapi import APIRouter

from closet.api.market import routes_dresses, routes_stats, routes_transactions

router = APIRouter()

router.include_router(routes_dresses.router, prefix="/dresses", tags=["dresses"])
router.include_router(routes_transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(routes_stats.router, tags=["stats"])
