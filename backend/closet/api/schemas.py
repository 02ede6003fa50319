"""Response models shared across routers."""
from dataclasses import asdict
from datetime import datetime
from typing import Optional

from closet.domain.common.types import CamelModel, SellerDetailView, SellerView
from closet.domain.market.models import Listing, Transaction
from closet.domain.market.queries import ListingView
from closet.domain.social.models import Message


class DressResponse(CamelModel):
    """Dress listing response."""
    id: int
    seller_id: int
    brand: str
    title: str
    description: str
    category: str
    size: str
    condition: str
    buttons_price: int
    original_price: int
    images: list[str]
    status: str
    views: int
    likes: int
    tags: list[str]
    created_at: datetime
    seller: Optional[SellerView] = None

    @classmethod
    def from_listing(cls, listing: Listing, seller: Optional[SellerView] = None) -> "DressResponse":
        data = asdict(listing)
        data["status"] = listing.status.value
        return cls(**data, seller=seller)

    @classmethod
    def from_view(cls, view: ListingView) -> "DressResponse":
        return cls.from_listing(view.listing, view.seller)


class DressDetailResponse(DressResponse):
    """Dress detail response, with follower count on the seller."""
    seller: Optional[SellerDetailView] = None


class DressListResponse(CamelModel):
    dresses: list[DressResponse]


class TransactionResponse(CamelModel):
    """Transaction response."""
    id: int
    dress_id: int
    buyer_id: int
    seller_id: int
    buttons_amount: int
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        data = asdict(transaction)
        data["status"] = transaction.status.value
        return cls(**data)


class MessageResponse(CamelModel):
    """Message response."""
    id: int
    sender_id: int
    recipient_id: int
    content: str
    dress_id: Optional[int] = None
    read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponse":
        return cls(**asdict(message))


class MessageResult(CamelModel):
    message: str
