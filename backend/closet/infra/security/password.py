"""Password hashing."""
from functools import lru_cache

import bcrypt

from closet.settings import settings

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a password against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(plain_password), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


@lru_cache
def _dummy_hash() -> str:
    return get_password_hash("not-a-real-password")


def burn_password_check(plain_password: str) -> None:
    """Spend the same time as a real check, for logins with an unknown email."""
    verify_password(plain_password, _dummy_hash())
