"""Read-only views over listings.

Everything here is a pure function over snapshots handed in by the caller:
nothing reaches into a repository, and nothing is mutated.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional

from closet.domain.admin.models import User
from closet.domain.common.types import SellerView
from closet.domain.market.models import Listing, ListingFilters, SortKey


@dataclass
class ListingView:
    """A listing joined with a view of its seller (None if the seller is gone)."""
    listing: Listing
    seller: Optional[SellerView]


def _ci_equal(value: Optional[str], wanted: str) -> bool:
    return (value or "").lower() == wanted.lower()


def matches(listing: Listing, filters: ListingFilters) -> bool:
    """True if an available listing passes every filter that is set."""
    if not listing.is_available:
        return False
    if filters.category and not _ci_equal(listing.category, filters.category):
        return False
    if filters.min_buttons is not None and listing.buttons_price < filters.min_buttons:
        return False
    if filters.max_buttons is not None and listing.buttons_price > filters.max_buttons:
        return False
    if filters.size and not _ci_equal(listing.size, filters.size):
        return False
    if filters.condition and not _ci_equal(listing.condition, filters.condition):
        return False
    if filters.search:
        needle = filters.search.lower()
        haystacks = (listing.title, listing.brand, listing.description)
        if not any(needle in (h or "").lower() for h in haystacks):
            return False
    return True


def sort_listings(listings: list[Listing], sort: Optional[str]) -> list[Listing]:
    """Order listings by a browse sort key. Unknown keys keep the input order."""
    if sort == SortKey.PRICE_LOW.value:
        return sorted(listings, key=lambda d: d.buttons_price)
    if sort == SortKey.PRICE_HIGH.value:
        return sorted(listings, key=lambda d: d.buttons_price, reverse=True)
    if sort == SortKey.NEWEST.value:
        return sorted(listings, key=lambda d: d.created_at, reverse=True)
    if sort == SortKey.POPULAR.value:
        return sorted(listings, key=lambda d: d.likes, reverse=True)
    return list(listings)


def search_listings(listings: Iterable[Listing], filters: ListingFilters) -> list[Listing]:
    return sort_listings([d for d in listings if matches(d, filters)], filters.sort)


def trending(listings: Iterable[Listing], limit: int) -> list[Listing]:
    """Available listings ranked by likes + 0.1 * views."""
    available = [d for d in listings if d.is_available]
    return sorted(available, key=lambda d: d.trending_score, reverse=True)[:limit]


def new_arrivals(listings: Iterable[Listing], limit: int) -> list[Listing]:
    """Available listings, newest first."""
    available = [d for d in listings if d.is_available]
    return sorted(available, key=lambda d: d.created_at, reverse=True)[:limit]


def join_sellers(
    listings: Iterable[Listing],
    sellers: Mapping[int, User],
    view: Callable[[User], SellerView] = User.seller_view,
) -> list[ListingView]:
    """Attach a seller view to each listing from a snapshot of users keyed by id."""
    joined = []
    for listing in listings:
        seller = sellers.get(listing.seller_id)
        joined.append(ListingView(listing=listing, seller=view(seller) if seller else None))
    return joined
