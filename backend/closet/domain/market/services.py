"""Market domain services."""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from closet.domain.admin.models import User
from closet.domain.common.errors import (
    AuthorizationError,
    InsufficientFundsError,
    InvalidOperationError,
    InvalidStateError,
    NotFoundError,
)
from closet.domain.common.store import Store
from closet.domain.market import queries
from closet.domain.market.models import (
    Listing,
    ListingFilters,
    ListingStatus,
    SellerStats,
    Transaction,
)
from closet.domain.market.queries import ListingView

logger = logging.getLogger(__name__)

# Fields an owner may change on an existing listing. Status is owned by the
# purchase flow and is not editable.
EDITABLE_FIELDS = (
    "brand",
    "title",
    "description",
    "category",
    "size",
    "condition",
    "buttons_price",
    "original_price",
    "images",
    "tags",
)


def seller_snapshot(store: Store, listings: Iterable[Listing]) -> dict[int, User]:
    """Users referenced by the given listings, keyed by id."""
    sellers = {}
    for seller_id in {d.seller_id for d in listings}:
        user = store.users.get_by_id(seller_id)
        if user is not None:
            sellers[seller_id] = user
    return sellers


class ListingService:
    """Listing lifecycle and browsing."""

    def __init__(self, store: Store, feed_limit: int = 12):
        self.store = store
        self.feed_limit = feed_limit

    def _join(self, listings: list[Listing]) -> list[ListingView]:
        return queries.join_sellers(listings, seller_snapshot(self.store, listings))

    def create_listing(self, seller_id: int, **fields: Any) -> Listing:
        """Create a listing owned by ``seller_id``. Unset fields take defaults."""
        if self.store.users.get_by_id(seller_id) is None:
            raise NotFoundError("User", seller_id)
        values = {k: v for k, v in fields.items() if v is not None}
        listing = self.store.listings.create(Listing(seller_id=seller_id, **values))
        logger.info(f"[MARKET] User {seller_id} listed dress {listing.id} for {listing.buttons_price} buttons")
        return listing

    def view_listing(self, listing_id: int) -> ListingView:
        """Fetch a listing for display. Every call counts as a view."""
        with self.store.atomic():
            listing = self.store.listings.get_by_id(listing_id)
            if not listing:
                raise NotFoundError("Dress", listing_id)
            listing.views += 1
            listing = self.store.listings.update(listing)

        seller = self.store.users.get_by_id(listing.seller_id)
        return ListingView(listing=listing, seller=seller.seller_detail_view() if seller else None)

    def _owned_listing(self, listing_id: int, user_id: int, action: str) -> Listing:
        listing = self.store.listings.get_by_id(listing_id)
        if not listing:
            raise NotFoundError("Dress", listing_id)
        if listing.seller_id != user_id:
            raise AuthorizationError(f"Can only {action} your own listings")
        return listing

    def update_listing(self, listing_id: int, user_id: int, changes: dict[str, Any]) -> Listing:
        """Apply a partial update. Keys that are missing or None are left alone."""
        with self.store.atomic():
            listing = self._owned_listing(listing_id, user_id, "edit")
            for name in EDITABLE_FIELDS:
                value = changes.get(name)
                if value is not None:
                    setattr(listing, name, value)
            return self.store.listings.update(listing)

    def delete_listing(self, listing_id: int, user_id: int) -> None:
        """Hard delete. Favorites and transactions may keep dangling references."""
        with self.store.atomic():
            self._owned_listing(listing_id, user_id, "delete")
            self.store.listings.delete(listing_id)
        logger.info(f"[MARKET] User {user_id} deleted dress {listing_id}")

    def list_for_seller(self, seller_id: int) -> list[Listing]:
        return self.store.listings.list_by_seller(seller_id)

    def browse(self, filters: ListingFilters) -> list[ListingView]:
        return self._join(queries.search_listings(self.store.listings.list_available(), filters))

    def trending(self) -> list[ListingView]:
        return self._join(queries.trending(self.store.listings.list_available(), self.feed_limit))

    def new_arrivals(self) -> list[ListingView]:
        return self._join(queries.new_arrivals(self.store.listings.list_available(), self.feed_limit))


@dataclass
class PurchaseResult:
    transaction: Transaction
    new_balance: int


@dataclass
class TransactionView:
    """A ledger entry seen from one participant."""
    transaction: Transaction
    dress: Optional[Listing]
    buyer: Optional[User]
    seller: Optional[User]
    type: str  # "purchase" or "sale"


class PurchaseService:
    """Buttons transfers between buyers and sellers."""

    def __init__(self, store: Store):
        self.store = store

    def purchase(self, listing_id: int, buyer_id: int) -> PurchaseResult:
        """Buy a listing.

        The whole check-then-transfer sequence holds the store lock, so two
        concurrent purchases can neither both see the listing available nor
        both spend the same balance.
        """
        with self.store.atomic():
            listing = self.store.listings.get_by_id(listing_id)
            if not listing:
                raise NotFoundError("Dress", listing_id)
            if listing.status != ListingStatus.AVAILABLE:
                raise InvalidStateError("Dress not available")

            buyer = self.store.users.get_by_id(buyer_id)
            if buyer is None:
                raise NotFoundError("User", buyer_id)
            if buyer.id == listing.seller_id:
                raise InvalidOperationError("Cannot buy your own dress")
            seller = self.store.users.get_by_id(listing.seller_id)
            if seller is None:
                raise NotFoundError("Seller", listing.seller_id)

            price = listing.buttons_price
            if buyer.buttons < price:
                raise InsufficientFundsError(required=price, available=buyer.buttons)

            buyer.buttons -= price
            seller.buttons += price
            listing.status = ListingStatus.SOLD

            buyer = self.store.users.update(buyer)
            self.store.users.update(seller)
            self.store.listings.update(listing)
            transaction = self.store.transactions.append(
                Transaction(
                    dress_id=listing.id,
                    buyer_id=buyer.id,
                    seller_id=seller.id,
                    buttons_amount=price,
                )
            )

        logger.info(
            f"[MARKET] Purchase {transaction.id}: user {buyer.id} bought dress {listing.id} "
            f"from user {seller.id} for {price} buttons"
        )
        return PurchaseResult(transaction=transaction, new_balance=buyer.buttons)

    def history(self, user_id: int) -> list[TransactionView]:
        """The user's purchases and sales, oldest first."""
        views = []
        for t in self.store.transactions.list_for_user(user_id):
            views.append(
                TransactionView(
                    transaction=t,
                    dress=self.store.listings.get_by_id(t.dress_id),
                    buyer=self.store.users.get_by_id(t.buyer_id),
                    seller=self.store.users.get_by_id(t.seller_id),
                    type="purchase" if t.buyer_id == user_id else "sale",
                )
            )
        return views


class StatsService:
    """Per-user marketplace statistics."""

    def __init__(self, store: Store):
        self.store = store

    def stats(self, user_id: int) -> SellerStats:
        user = self.store.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        dresses = self.store.listings.list_by_seller(user_id)
        ledger = self.store.transactions.list_for_user(user_id)
        sales = [t for t in ledger if t.seller_id == user_id]
        purchases = [t for t in ledger if t.buyer_id == user_id]

        return SellerStats(
            buttons=user.buttons,
            active_listings=sum(1 for d in dresses if d.status == ListingStatus.AVAILABLE),
            sold_items=sum(1 for d in dresses if d.status == ListingStatus.SOLD),
            total_sales=len(sales),
            total_purchases=len(purchases),
            total_earned=sum(t.buttons_amount for t in sales),
            total_spent=sum(t.buttons_amount for t in purchases),
            total_views=sum(d.views for d in dresses),
            total_likes=sum(d.likes for d in dresses),
        )
