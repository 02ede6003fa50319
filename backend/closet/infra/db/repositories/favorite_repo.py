"""Favorite repository implementation."""
import threading
from typing import Optional

from closet.domain.social.models import Favorite
from closet.domain.social.repositories import FavoriteRepository


class FavoriteRepositoryImpl(FavoriteRepository):
    """Favorites keyed by (user_id, dress_id)."""

    def __init__(self) -> None:
        self._rows: dict[tuple[int, int], Favorite] = {}
        self._lock = threading.RLock()

    def add(self, favorite: Favorite) -> Favorite:
        with self._lock:
            if favorite.key in self._rows:
                raise KeyError(favorite.key)
            self._rows[favorite.key] = favorite
            return favorite

    def get(self, user_id: int, dress_id: int) -> Optional[Favorite]:
        with self._lock:
            return self._rows.get((user_id, dress_id))

    def remove(self, user_id: int, dress_id: int) -> bool:
        with self._lock:
            return self._rows.pop((user_id, dress_id), None) is not None

    def list_by_user(self, user_id: int) -> list[Favorite]:
        with self._lock:
            return [f for f in self._rows.values() if f.user_id == user_id]
