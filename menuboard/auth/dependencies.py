# auth/dependencies.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from menuboard.core.exceptions import AuthError
from menuboard.auth.tokens import verify_token

bearer_scheme = HTTPBearer(auto_error=False)

SESSION_TOKEN_KEY = "admin_token"


class AdminLoginRequired(Exception):
    """Raised by console pages; turned into a redirect to /admin/login"""
    pass


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    if credentials is None:
        raise AuthError("Token required", status_code=401)
    return verify_token(credentials.credentials)


def get_session_claims(request: Request) -> Optional[dict]:
    token = request.session.get(SESSION_TOKEN_KEY)
    if not token:
        return None
    try:
        return verify_token(token)
    except AuthError:
        request.session.pop(SESSION_TOKEN_KEY, None)
        return None


async def require_admin_session(request: Request) -> dict:
    claims = get_session_claims(request)
    if claims is None:
        raise AdminLoginRequired()
    return claims
