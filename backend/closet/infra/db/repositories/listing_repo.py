"""Listing repository implementation."""
from typing import Optional

from closet.domain.market.models import Listing
from closet.domain.market.repositories import ListingRepository
from closet.infra.db.base import InMemoryTable


class ListingRepositoryImpl(ListingRepository):
    """Listing repository implementation."""

    def __init__(self) -> None:
        self._table: InMemoryTable[Listing] = InMemoryTable()

    def create(self, listing: Listing) -> Listing:
        """Create a new listing."""
        return self._table.insert(listing)

    def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Get listing by ID."""
        return self._table.get(listing_id)

    def list_available(self) -> list[Listing]:
        return self._table.filter(lambda d: d.is_available)

    def list_by_seller(self, seller_id: int) -> list[Listing]:
        return self._table.filter(lambda d: d.seller_id == seller_id)

    def update(self, listing: Listing) -> Listing:
        """Update listing."""
        return self._table.replace(listing)

    def delete(self, listing_id: int) -> bool:
        """Delete listing."""
        return self._table.delete(listing_id)

    def count(self) -> int:
        return len(self._table)
