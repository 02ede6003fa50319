"""Message repository implementation."""
from closet.domain.social.models import Message
from closet.domain.social.repositories import MessageRepository
from closet.infra.db.base import InMemoryTable


class MessageRepositoryImpl(MessageRepository):
    """Message repository implementation."""

    def __init__(self) -> None:
        self._table: InMemoryTable[Message] = InMemoryTable()

    def create(self, message: Message) -> Message:
        """Store a message."""
        return self._table.insert(message)

    def list_involving(self, user_id: int) -> list[Message]:
        return self._table.filter(lambda m: user_id in (m.sender_id, m.recipient_id))

    def list_thread(self, user_id: int, other_id: int) -> list[Message]:
        directions = ((user_id, other_id), (other_id, user_id))
        return self._table.filter(lambda m: (m.sender_id, m.recipient_id) in directions)

    def mark_read(self, message_ids: list[int]) -> int:
        changed = 0
        with self._table.lock:
            for message_id in message_ids:
                message = self._table.get(message_id)
                if message is None or message.read:
                    continue
                message.read = True
                self._table.replace(message)
                changed += 1
        return changed
