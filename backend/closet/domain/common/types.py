"""Common domain types."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Identity(BaseModel):
    """Authenticated caller resolved from an access token."""

    id: int
    username: str


class SellerView(CamelModel):
    """Reduced public view of a user, joined onto listings."""

    id: int
    username: str
    avatar: Optional[str] = None


class SellerDetailView(SellerView):
    """Seller view shown on a listing's detail page."""

    followers: int = 0
