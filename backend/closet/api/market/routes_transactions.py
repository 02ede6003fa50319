"""Transaction routes."""
from typing import Optional

from fastapi import APIRouter, Depends

from closet.api.deps import get_current_identity, get_db
from closet.api.schemas import TransactionResponse
from closet.domain.common.types import CamelModel, Identity
from closet.domain.market.services import PurchaseService, TransactionView
from closet.infra.db.session import Database

router = APIRouter()


class PurchaseRequest(CamelModel):
    """Purchase request."""
    dress_id: int


class PurchaseResponse(CamelModel):
    message: str
    transaction: TransactionResponse
    new_button_balance: int


class DressSummary(CamelModel):
    id: int
    title: str
    brand: str
    images: list[str]


class UserRef(CamelModel):
    id: int
    username: str


class TransactionHistoryItem(TransactionResponse):
    """Ledger entry joined with the dress and both parties."""
    dress: Optional[DressSummary] = None
    buyer: Optional[UserRef] = None
    seller: Optional[UserRef] = None
    type: str

    @classmethod
    def from_view(cls, view: TransactionView) -> "TransactionHistoryItem":
        base = TransactionResponse.from_entity(view.transaction).model_dump()
        dress = view.dress
        return cls(
            **base,
            dress=DressSummary(id=dress.id, title=dress.title, brand=dress.brand, images=dress.images) if dress else None,
            buyer=UserRef(id=view.buyer.id, username=view.buyer.username) if view.buyer else None,
            seller=UserRef(id=view.seller.id, username=view.seller.username) if view.seller else None,
            type=view.type,
        )


class TransactionHistoryResponse(CamelModel):
    transactions: list[TransactionHistoryItem]


@router.post("/purchase", response_model=PurchaseResponse)
def purchase_dress(
    request: PurchaseRequest,
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Buy a dress with buttons."""
    result = PurchaseService(db).purchase(request.dress_id, current_user.id)
    return PurchaseResponse(
        message="Purchase successful!",
        transaction=TransactionResponse.from_entity(result.transaction),
        new_button_balance=result.new_balance,
    )


@router.get("/history", response_model=TransactionHistoryResponse)
async def transaction_history(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """The caller's purchases and sales."""
    views = PurchaseService(db).history(current_user.id)
    return TransactionHistoryResponse(transactions=[TransactionHistoryItem.from_view(v) for v in views])
