import logging

from fastapi import APIRouter

from menuboard.core.config import settings
from menuboard.core.exceptions import AuthError
from menuboard.auth.tokens import check_password, issue_token
from menuboard.schemas.auth import LoginRequest, TokenResponse

log = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest):
    """Exchange the shared admin password for a bearer token"""
    if not check_password(payload.password):
        log.warning("Admin login failed")
        raise AuthError("Invalid password", status_code=401)

    return TokenResponse(
        token=issue_token(),
        expires_in=settings.jwt_lifetime_seconds,
    )
