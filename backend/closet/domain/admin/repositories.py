"""Account domain repository protocols."""
from typing import Protocol

from closet.domain.admin.models import User


class UserRepository(Protocol):
    """User repository protocol."""

    def create(self, user: User) -> User:
        """Create a new user, assigning the next id."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        ...

    def get_by_username(self, username: str) -> User | None:
        """Get user by username."""
        ...

    def update(self, user: User) -> User:
        """Update user."""
        ...

    def count(self) -> int:
        """Number of stored users."""
        ...
