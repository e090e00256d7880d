"""
api/routes/auth.py
------------------
Editor authentication.

POST /auth/login  — Exchange a tenant slug + admin key for a bearer token.
"""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.config import settings
from careers.core.security import create_access_token
from careers.db.session import get_db
from careers.dependencies import get_services
from careers.schemas.auth import LoginRequest, TokenResponse
from careers.services.container import Services

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with the tenant admin key and receive a bearer token",
)
async def login(
    body: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    services: Annotated[Services, Depends(get_services)],
) -> TokenResponse:
    """
    Unknown tenants and wrong keys both answer 401, so the response does
    not reveal which slugs exist.
    """
    tenant = await services.auth.authenticate(db, body.slug, body.admin_key)
    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid company or admin key",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return TokenResponse(
        token=create_access_token(tenant.slug, expires_delta=expires),
        token_type="bearer",
        expires_in=int(expires.total_seconds()),
        slug=tenant.slug,
    )
