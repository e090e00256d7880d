"""
core/security.py
----------------
Admin-key comparison and bearer token utilities.

Design decisions:
  - Each tenant has a single shared admin key stored as plain text.
    It is compared by exact string equality (hmac.compare_digest, so the
    comparison time does not depend on where the strings differ).
  - After a successful comparison the caller receives a signed JWT whose
    'sub' claim is the tenant slug. Routes that mutate a tenant verify the
    signature and that the slug matches the path.
"""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from careers.core.config import settings


# ── Admin Key ─────────────────────────────────────────────────────────────────

def admin_key_matches(supplied: str, stored: str) -> bool:
    """Exact, case-sensitive equality of the supplied and stored admin key."""
    return hmac.compare_digest(supplied.encode("utf-8"), stored.encode("utf-8"))


# ── JWT Utilities ─────────────────────────────────────────────────────────────

def create_access_token(
    slug: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Mint a JWT access token for a tenant editor.

    Args:
        slug: Tenant slug (stored in 'sub' claim).
        expires_delta: Optional custom expiry; defaults to settings value.

    Returns:
        Signed JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload: Dict[str, Any] = {
        "sub": slug,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        JWTError: If the token is invalid, expired, or tampered with.

    Returns:
        Raw payload dict.
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
