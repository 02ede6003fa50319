"""Social domain services."""
import logging
from typing import Optional

from closet.domain.common.errors import BadRequestError, ConflictError, NotFoundError
from closet.domain.common.store import Store
from closet.domain.market import queries
from closet.domain.market.queries import ListingView
from closet.domain.market.services import seller_snapshot
from closet.domain.social.models import Conversation, Favorite, Message

logger = logging.getLogger(__name__)


class FavoriteService:
    """Favorites and the like counters they drive."""

    def __init__(self, store: Store):
        self.store = store

    def add_favorite(self, user_id: int, dress_id: int) -> Favorite:
        with self.store.atomic():
            listing = self.store.listings.get_by_id(dress_id)
            if not listing:
                raise NotFoundError("Dress", dress_id)
            if self.store.favorites.get(user_id, dress_id):
                raise ConflictError("Already in favorites")

            favorite = self.store.favorites.add(Favorite(user_id=user_id, dress_id=dress_id))
            listing.likes += 1
            self.store.listings.update(listing)
            return favorite

    def remove_favorite(self, user_id: int, dress_id: int) -> None:
        with self.store.atomic():
            if not self.store.favorites.remove(user_id, dress_id):
                raise NotFoundError("Favorite", dress_id)

            listing = self.store.listings.get_by_id(dress_id)
            if listing and listing.likes > 0:
                listing.likes -= 1
                self.store.listings.update(listing)

    def list_favorites(self, user_id: int) -> list[ListingView]:
        """Favorited listings that still exist, in the order they were added."""
        listings = []
        for favorite in self.store.favorites.list_by_user(user_id):
            listing = self.store.listings.get_by_id(favorite.dress_id)
            if listing is not None:
                listings.append(listing)
        return queries.join_sellers(listings, seller_snapshot(self.store, listings))


class MessageService:
    """Direct messages between users."""

    def __init__(self, store: Store):
        self.store = store

    def send_message(
        self,
        sender_id: int,
        recipient_id: Optional[int],
        content: Optional[str],
        dress_id: Optional[int] = None,
    ) -> Message:
        if not recipient_id or not content:
            raise BadRequestError("Recipient and content required")
        if self.store.users.get_by_id(recipient_id) is None:
            raise NotFoundError("Recipient", recipient_id)

        message = self.store.messages.create(
            Message(
                sender_id=sender_id,
                recipient_id=recipient_id,
                content=content,
                dress_id=dress_id,
            )
        )
        logger.debug(f"[MESSAGES] {sender_id} -> {recipient_id}: message {message.id}")
        return message

    def list_conversations(self, user_id: int) -> list[Conversation]:
        """One summary per counterparty, in order of first contact."""
        conversations: dict[int, Conversation] = {}
        for message in self.store.messages.list_involving(user_id):
            partner_id = message.counterparty(user_id)
            conversation = conversations.get(partner_id)
            if conversation is None:
                partner = self.store.users.get_by_id(partner_id)
                conversation = Conversation(
                    user=partner.seller_view() if partner else None,
                    last_message=message,
                )
                conversations[partner_id] = conversation

            if message.created_at > conversation.last_message.created_at:
                conversation.last_message = message
            if not message.read and message.recipient_id == user_id:
                conversation.unread_count += 1

        return list(conversations.values())

    def read_thread(self, user_id: int, other_id: int) -> list[Message]:
        """Full history with one user, oldest first. Marks incoming messages read."""
        with self.store.atomic():
            thread = sorted(
                self.store.messages.list_thread(user_id, other_id),
                key=lambda m: m.created_at,
            )
            unread = [m.id for m in thread if m.recipient_id == user_id and not m.read]
            self.store.messages.mark_read(unread)

        for message in thread:
            if message.recipient_id == user_id:
                message.read = True
        return thread
