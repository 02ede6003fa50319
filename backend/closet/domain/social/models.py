"""Social domain models: favorites and direct messages."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from closet.domain.common.types import SellerView, utcnow


@dataclass(frozen=True)
class Favorite:
    """A user's favorite listing. At most one per (user, dress) pair."""
    user_id: int
    dress_id: int
    created_at: datetime = field(default_factory=utcnow)

    @property
    def key(self) -> tuple[int, int]:
        return (self.user_id, self.dress_id)


@dataclass
class Message:
    """Direct message domain model."""
    sender_id: int
    recipient_id: int
    content: str
    dress_id: Optional[int] = None
    read: bool = False
    created_at: datetime = field(default_factory=utcnow)
    id: int = 0  # assigned by the repository on insert

    def counterparty(self, user_id: int) -> int:
        """The other participant, seen from ``user_id``."""
        return self.recipient_id if self.sender_id == user_id else self.sender_id


@dataclass
class Conversation:
    """Summary of all messages between the caller and one counterparty."""
    user: Optional[SellerView]
    last_message: Message
    unread_count: int = 0
