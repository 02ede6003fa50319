"""Market domain models."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from closet.domain.common.types import utcnow


class ListingStatus(str, Enum):
    """Listing status enum."""
    AVAILABLE = "available"
    SOLD = "sold"


class TransactionStatus(str, Enum):
    """Transaction status enum."""
    COMPLETED = "completed"


class SortKey(str, Enum):
    """Browse sort orders."""
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NEWEST = "newest"
    POPULAR = "popular"


@dataclass
class Listing:
    """Dress listing domain model."""
    seller_id: int
    brand: str
    title: str
    buttons_price: int
    description: str = "Pre-loved item"
    category: str = "Cocktail"
    size: str = "M"
    condition: str = "Good"
    original_price: int = 0
    images: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    status: ListingStatus = ListingStatus.AVAILABLE
    views: int = 0
    likes: int = 0
    created_at: datetime = field(default_factory=utcnow)
    id: int = 0  # assigned by the repository on insert

    @property
    def is_available(self) -> bool:
        return self.status == ListingStatus.AVAILABLE

    @property
    def trending_score(self) -> float:
        return self.likes + 0.1 * self.views


@dataclass(frozen=True)
class Transaction:
    """Completed purchase. Immutable once recorded."""
    dress_id: int
    buyer_id: int
    seller_id: int
    buttons_amount: int
    status: TransactionStatus = TransactionStatus.COMPLETED
    created_at: datetime = field(default_factory=utcnow)
    id: int = 0  # assigned by the repository on insert


@dataclass
class ListingFilters:
    """Browse filters. ``None`` means "don't filter on this"."""
    category: Optional[str] = None
    min_buttons: Optional[int] = None
    max_buttons: Optional[int] = None
    size: Optional[str] = None
    condition: Optional[str] = None
    search: Optional[str] = None
    sort: Optional[str] = None


@dataclass
class SellerStats:
    """Aggregate seller/buyer numbers for one user."""
    buttons: int
    active_listings: int
    sold_items: int
    total_sales: int
    total_purchases: int
    total_earned: int
    total_spent: int
    total_views: int
    total_likes: int
