"""Access tokens.

Tokens are self-contained: the signed claims carry the caller's id and
username, so verifying one never touches the user store.
"""
from datetime import timedelta
from typing import Any, Optional

from jose import JWTError, jwt

from closet.domain.common.errors import AuthenticationError, AuthorizationError
from closet.domain.common.types import Identity, utcnow
from closet.settings import settings

TOKEN_TYPE_ACCESS = "access"


def create_access_token(
    identity: Identity,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Sign an access token binding the caller's id and username."""
    expire = utcnow() + (expires_delta or timedelta(days=settings.access_token_expire_days))
    to_encode = {
        "sub": str(identity.id),
        "username": identity.username,
        "type": TOKEN_TYPE_ACCESS,
        "exp": expire,
    }
    return jwt.encode(to_encode, secret_key or settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, secret_key: Optional[str] = None) -> Optional[dict[str, Any]]:
    """Decode and verify a token. Returns None on bad signature, format or expiry."""
    try:
        return jwt.decode(token, secret_key or settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


def verify_access_token(token: Optional[str], secret_key: Optional[str] = None) -> Identity:
    """Resolve a raw bearer token to the caller's identity.

    Raises:
        AuthenticationError: no token was supplied.
        AuthorizationError: the token is malformed, forged or expired.
    """
    if not token:
        raise AuthenticationError("Access token required")

    payload = decode_token(token, secret_key)
    if payload is None or payload.get("type") != TOKEN_TYPE_ACCESS:
        raise AuthorizationError("Invalid token")

    try:
        return Identity(id=int(payload["sub"]), username=payload["username"])
    except (KeyError, TypeError, ValueError):
        raise AuthorizationError("Invalid token")
