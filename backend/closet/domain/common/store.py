"""The store seen by domain services."""
from contextlib import AbstractContextManager
from typing import Protocol

from closet.domain.admin.repositories import UserRepository
from closet.domain.market.repositories import ListingRepository, TransactionRepository
from closet.domain.social.repositories import FavoriteRepository, MessageRepository


class Store(Protocol):
    """All repositories plus a scope that makes read-check-write sequences atomic."""

    users: UserRepository
    listings: ListingRepository
    transactions: TransactionRepository
    favorites: FavoriteRepository
    messages: MessageRepository

    def atomic(self) -> AbstractContextManager[None]:
        """Mutual-exclusion scope spanning every repository."""
        ...
