"""
Shared-password admin tokens.

There is no user model: one configured password is exchanged for an
HS256 JWT carrying a fixed ``role`` claim. Everything that signs or reads
tokens goes through ``issue_token`` / ``verify_token``.
"""
import hmac
from datetime import datetime, timedelta, timezone

import jwt

from menuboard.core.config import settings
from menuboard.core.constants import ADMIN_ROLE
from menuboard.core.exceptions import AuthError


def check_password(password: str) -> bool:
    return hmac.compare_digest(
        (password or "").encode("utf-8"),
        settings.admin_password.encode("utf-8"),
    )


def issue_token(role: str = ADMIN_ROLE, lifetime_seconds: int = None) -> str:
    now = datetime.now(timezone.utc)
    lifetime = settings.jwt_lifetime_seconds if lifetime_seconds is None else lifetime_seconds
    claims = {
        "role": role,
        "iat": now,
        "exp": now + timedelta(seconds=lifetime),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict:
    """Claims of a valid admin token, AuthError otherwise"""
    if not token:
        raise AuthError("Token required", status_code=401)
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired", status_code=401)
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token", status_code=403)

    if claims.get("role") != ADMIN_ROLE:
        raise AuthError("Invalid token", status_code=403)
    return claims
