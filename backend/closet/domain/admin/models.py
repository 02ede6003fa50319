"""Account domain models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from closet.domain.common.types import Identity, SellerDetailView, SellerView, utcnow


class User(BaseModel):
    """User domain model."""

    id: int = 0  # assigned by the repository on insert
    username: str
    email: EmailStr
    password_hash: str
    buttons: int = Field(default=0, ge=0)
    avatar: Optional[str] = None
    bio: str = ""
    followers: int = 0
    following: int = 0
    created_at: datetime

    @classmethod
    def create(
        cls,
        username: str,
        email: EmailStr,
        password_hash: str,
        buttons: int,
    ) -> "User":
        """Create a new user."""
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            buttons=buttons,
            created_at=utcnow(),
        )

    def identity(self) -> Identity:
        return Identity(id=self.id, username=self.username)

    def seller_view(self) -> SellerView:
        return SellerView(id=self.id, username=self.username, avatar=self.avatar)

    def seller_detail_view(self) -> SellerDetailView:
        return SellerDetailView(
            id=self.id,
            username=self.username,
            avatar=self.avatar,
            followers=self.followers,
        )
