"""Social domain repository protocols."""
from typing import Protocol

from closet.domain.social.models import Favorite, Message


class FavoriteRepository(Protocol):
    """Favorite repository protocol."""

    def add(self, favorite: Favorite) -> Favorite:
        """Store a favorite. The (user, dress) pair must not exist yet."""
        ...

    def get(self, user_id: int, dress_id: int) -> Favorite | None:
        """Get a favorite pair."""
        ...

    def remove(self, user_id: int, dress_id: int) -> bool:
        """Remove a favorite pair. Returns False if it did not exist."""
        ...

    def list_by_user(self, user_id: int) -> list[Favorite]:
        """A user's favorites in the order they were added."""
        ...


class MessageRepository(Protocol):
    """Message repository protocol."""

    def create(self, message: Message) -> Message:
        """Store a message, assigning the next id."""
        ...

    def list_involving(self, user_id: int) -> list[Message]:
        """Messages sent or received by a user, in send order."""
        ...

    def list_thread(self, user_id: int, other_id: int) -> list[Message]:
        """Messages between two users, in send order."""
        ...

    def mark_read(self, message_ids: list[int]) -> int:
        """Set the read flag on the given messages. Returns how many changed."""
        ...
