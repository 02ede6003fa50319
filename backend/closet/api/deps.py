"""API dependencies."""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from closet.domain.common.types import Identity
from closet.infra.db.session import Database
from closet.infra.security.jwt import verify_access_token

# auto_error=False: a missing header must reach verify_access_token as a 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Database:
    """The process-wide store attached to the running app."""
    return request.app.state.db


def token_from_header(header: Optional[str]) -> Optional[str]:
    """Second word of an ``Authorization`` header, whatever the scheme."""
    parts = (header or "").split()
    return parts[1] if len(parts) > 1 else None


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    """Get the authenticated caller from the ``Authorization`` header.

    A header with a scheme other than Bearer still counts as a presented
    credential, so it fails as an invalid token rather than a missing one.
    """
    if credentials:
        token = credentials.credentials
    else:
        token = token_from_header(request.headers.get("authorization"))
    return verify_access_token(token)
