"""Market domain repository protocols."""
from typing import Protocol

from closet.domain.market.models import Listing, Transaction


class ListingRepository(Protocol):
    """Listing repository protocol."""

    def create(self, listing: Listing) -> Listing:
        """Create a new listing, assigning the next id."""
        ...

    def get_by_id(self, listing_id: int) -> Listing | None:
        """Get listing by ID."""
        ...

    def list_available(self) -> list[Listing]:
        """Listings with status ``available``, in insertion order."""
        ...

    def list_by_seller(self, seller_id: int) -> list[Listing]:
        """All listings owned by a seller, any status."""
        ...

    def update(self, listing: Listing) -> Listing:
        """Update listing."""
        ...

    def delete(self, listing_id: int) -> bool:
        """Delete listing. Returns False if it did not exist."""
        ...

    def count(self) -> int:
        """Number of stored listings."""
        ...


class TransactionRepository(Protocol):
    """Append-only transaction ledger protocol."""

    def append(self, transaction: Transaction) -> Transaction:
        """Record a transaction, assigning the next id."""
        ...

    def list_for_user(self, user_id: int) -> list[Transaction]:
        """Transactions where the user is buyer or seller."""
        ...

    def list_for_dress(self, dress_id: int) -> list[Transaction]:
        """Transactions referencing a listing."""
        ...

    def count(self) -> int:
        """Number of recorded transactions."""
        ...
