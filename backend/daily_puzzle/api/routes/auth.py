"""Auth Routes: whoami and logout.

Invariants:
    - Both endpoints are public
    - logout always succeeds, even for anonymous callers

Design Decisions:
    - Login (OAuth redirect/callback) lives outside this API; it calls
      services.identity.sign_in once the provider has verified the user
"""

from fastapi import APIRouter, Depends, Request

from daily_puzzle.api.dependencies import get_identity
from daily_puzzle.models.user import User
from daily_puzzle.schemas.user import LogoutResponse, UserResponse
from daily_puzzle.services.identity import sign_out

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.get("/me", response_model=UserResponse | None)
async def me(identity: User | None = Depends(get_identity)):
    """Return the caller's identity, or null."""
    return identity


@router.post("/logout", response_model=LogoutResponse)
async def logout(request: Request):
    """Clear the session cookie."""
    sign_out(request.session)
    return LogoutResponse(success=True)
