"""Authentication routes."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr

from closet.api.deps import get_current_identity, get_db
from closet.domain.admin.models import User
from closet.domain.admin.services import UserService
from closet.domain.common.types import CamelModel, Identity
from closet.infra.db.session import Database
from closet.infra.security.jwt import create_access_token
from closet.settings import settings

router = APIRouter()


class RegisterRequest(CamelModel):
    """Register request model."""
    username: str
    email: EmailStr
    password: str


class LoginRequest(CamelModel):
    """Login request model."""
    email: EmailStr
    password: str


class UserSummary(CamelModel):
    id: int
    username: str
    email: str
    buttons: int
    avatar: Optional[str] = None


class TokenResponse(CamelModel):
    """Token response model."""
    message: str
    token: str
    user: UserSummary


class UserMeResponse(CamelModel):
    """Current user response model."""
    id: int
    username: str
    email: str
    buttons: int
    avatar: Optional[str] = None
    bio: str
    followers: int
    following: int
    created_at: datetime


def _token_response(message: str, user: User) -> TokenResponse:
    return TokenResponse(
        message=message,
        token=create_access_token(user.identity()),
        user=UserSummary(
            id=user.id,
            username=user.username,
            email=user.email,
            buttons=user.buttons,
            avatar=user.avatar,
        ),
    )


# Plain ``def`` so bcrypt runs in the threadpool rather than on the event loop.
@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Database = Depends(get_db)):
    """Create an account and return an access token."""
    service = UserService(db, starting_balance=settings.starting_balance)
    user = service.register(request.username, request.email, request.password)
    return _token_response("User registered successfully", user)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Database = Depends(get_db)):
    """Exchange email and password for an access token."""
    user = UserService(db).authenticate(request.email, request.password)
    return _token_response("Login successful", user)


@router.get("/me", response_model=UserMeResponse)
async def get_me(
    current_user: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db),
):
    """Get current user."""
    user = UserService(db).get_user(current_user.id)
    return UserMeResponse(**user.model_dump(exclude={"password_hash"}))
