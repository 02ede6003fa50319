"""User repository implementation."""
from typing import Optional

from closet.domain.admin.models import User
from closet.domain.admin.repositories import UserRepository
from closet.infra.db.base import InMemoryTable


class UserRepositoryImpl(UserRepository):
    """User repository implementation."""

    def __init__(self) -> None:
        self._table: InMemoryTable[User] = InMemoryTable()

    def create(self, user: User) -> User:
        """Create a new user."""
        return self._table.insert(user)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self._table.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self._table.find(lambda u: u.email == email)

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        return self._table.find(lambda u: u.username == username)

    def update(self, user: User) -> User:
        """Update user."""
        return self._table.replace(user)

    def count(self) -> int:
        return len(self._table)
