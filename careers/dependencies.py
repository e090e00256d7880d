"""
dependencies.py
---------------
FastAPI dependency injection functions for services and editor auth.

Flow:
  1. get_services returns the Services container built once in
     create_application() and stored on app.state.
  2. HTTPBearer extracts the Bearer token from the Authorization header.
  3. require_tenant_editor validates the JWT and checks that its 'sub'
     (the tenant slug) matches the {slug} path parameter, so an editor of
     one tenant cannot write another tenant's configuration.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from careers.core.logging import get_logger
from careers.core.security import decode_access_token
from careers.services.container import Services

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


def get_services(request: Request) -> Services:
    return request.app.state.services


async def require_tenant_editor(
    slug: str,
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
) -> str:
    """
    Return the slug the bearer token was issued for.
    Raises 401 if the token is missing, invalid, expired or for another tenant.
    """
    if credentials is None:
        raise _CREDENTIALS_EXCEPTION
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as exc:
        logger.warning("JWT decode failed", error=str(exc))
        raise _CREDENTIALS_EXCEPTION

    token_slug = payload.get("sub")
    if token_slug != slug:
        logger.warning("Token issued for another tenant", slug=slug, token_slug=token_slug)
        raise _CREDENTIALS_EXCEPTION
    return token_slug
