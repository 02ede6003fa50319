"""Account domain services."""
import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from closet.domain.admin.models import User
from closet.domain.common.errors import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from closet.domain.common.store import Store
from closet.infra.security.password import (
    burn_password_check,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """Canonical form of an address, as stored on ``User.email``.

    Raises:
        BadRequestError: the address is not a valid email.
    """
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        raise BadRequestError("Invalid email")


@dataclass
class PublicProfile:
    """A user plus the number of listings they currently have for sale."""
    user: User
    dress_count: int


class UserService:
    """Registration, login and profile management."""

    def __init__(self, store: Store, starting_balance: int = 100):
        self.store = store
        self.starting_balance = starting_balance

    def register(self, username: str, email: str, password: str) -> User:
        """Create a new account with the starting buttons balance."""
        if not username or not email or not password:
            raise BadRequestError("All fields required")
        email = normalize_email(email)

        password_hash = get_password_hash(password)
        with self.store.atomic():
            if self.store.users.get_by_email(email):
                raise ConflictError("Email already registered")
            if self.store.users.get_by_username(username):
                raise ConflictError("Username taken")
            user = self.store.users.create(
                User.create(
                    username=username,
                    email=email,
                    password_hash=password_hash,
                    buttons=self.starting_balance,
                )
            )

        logger.info(f"[AUTH] Registered user {user.id} ({user.username})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Unknown email and wrong password fail identically, down to running
        a bcrypt comparison in both cases.
        """
        try:
            user = self.store.users.get_by_email(normalize_email(email))
        except BadRequestError:
            user = None
        if user is None:
            burn_password_check(password)
            logger.warning("[AUTH] Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, user.password_hash):
            logger.warning(f"[AUTH] Login failed: bad password for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"[AUTH] Login successful for user {user.id}")
        return user

    def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        user = self.store.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def get_public_profile(self, user_id: int) -> PublicProfile:
        user = self.get_user(user_id)
        active = [d for d in self.store.listings.list_by_seller(user.id) if d.is_available]
        return PublicProfile(user=user, dress_count=len(active))

    def update_profile(
        self,
        user_id: int,
        username: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> User:
        """Change username and/or bio. Fields left as None are untouched."""
        with self.store.atomic():
            user = self.get_user(user_id)

            if username and username != user.username:
                holder = self.store.users.get_by_username(username)
                if holder and holder.id != user.id:
                    raise ConflictError("Username taken")
                user.username = username

            if bio is not None:
                user.bio = bio

            return self.store.users.update(user)
