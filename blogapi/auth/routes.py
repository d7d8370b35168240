# =============================================================================
# Auth API Routes
# =============================================================================
#
# Endpoints:
#   POST /api/auth/register - Create account, get a token
#   POST /api/auth/login    - Get a token
#   GET  /api/auth/me       - Get current user
#
# =============================================================================

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, Field

from blogapi.auth.context import AuthContext
from blogapi.auth.jwt import TokenCodec
from blogapi.auth.policies import get_token_codec, get_user_service, require_user
from blogapi.core.models import User, UserPublic
from blogapi.errors import Unauthenticated
from blogapi.services.users import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


# =============================================================================
# Request/Response Models
# =============================================================================

class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: UserPublic


def _auth_response(codec: TokenCodec, user: User) -> AuthResponse:
    return AuthResponse(
        token=codec.issue(user.id),
        expires_in=codec.expires_in,
        user=user.public(),
    )


# =============================================================================
# Public Endpoints
# =============================================================================

@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    data: RegisterRequest,
    users: UserService = Depends(get_user_service),
    codec: TokenCodec = Depends(get_token_codec),
):
    """
    Create a new account.

    Returns a token on success so the client is logged in straight away.
    """
    user = await users.register(data.username, data.email, data.password)
    return _auth_response(codec, user)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    users: UserService = Depends(get_user_service),
    codec: TokenCodec = Depends(get_token_codec),
):
    """Authenticate and get a token."""
    user = await users.authenticate(data.email, data.password)
    if not user:
        raise Unauthenticated("Invalid email or password")
    return _auth_response(codec, user)


# =============================================================================
# Protected Endpoints
# =============================================================================

@router.get("/me", response_model=UserPublic)
async def get_current_user(ctx: AuthContext = Depends(require_user)):
    """Get the current authenticated user."""
    return ctx.user
