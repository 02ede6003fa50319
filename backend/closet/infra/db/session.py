"""Process-wide store container."""
import threading
from contextlib import contextmanager
from typing import Iterator

from closet.infra.db.repositories.favorite_repo import FavoriteRepositoryImpl
from closet.infra.db.repositories.listing_repo import ListingRepositoryImpl
from closet.infra.db.repositories.message_repo import MessageRepositoryImpl
from closet.infra.db.repositories.transaction_repo import TransactionRepositoryImpl
from closet.infra.db.repositories.user_repo import UserRepositoryImpl


class Database:
    """Owns every repository plus the lock for multi-store mutations.

    Any sequence that reads shared state, checks it and then writes must run
    inside ``atomic()``. The atomic lock is always taken before any
    repository lock.
    """

    def __init__(self) -> None:
        self.users = UserRepositoryImpl()
        self.listings = ListingRepositoryImpl()
        self.transactions = TransactionRepositoryImpl()
        self.favorites = FavoriteRepositoryImpl()
        self.messages = MessageRepositoryImpl()
        self._atomic_lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._atomic_lock:
            yield

    def sizes(self) -> dict[str, int]:
        """Row counts reported by the health endpoint."""
        return {
            "users": self.users.count(),
            "dresses": self.listings.count(),
            "transactions": self.transactions.count(),
        }
