"""
api/routes/tenants.py
---------------------
Tenant configuration endpoints.

GET /companies/{slug}/config  — Public: branding + ordered sections.
PUT /companies/{slug}/config  — Editor: save branding and replace all
                                sections, returns the refreshed config.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.exceptions import StorageError, TenantNotFoundError
from careers.db.session import get_db
from careers.dependencies import get_services, require_tenant_editor
from careers.schemas.config import ConfigUpdate, TenantConfig
from careers.services.container import Services

router = APIRouter(prefix="/companies", tags=["Tenants"])


@router.get(
    "/{slug}/config",
    response_model=TenantConfig,
    summary="Get a tenant's branding and ordered sections",
)
async def get_config(
    slug: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    services: Annotated[Services, Depends(get_services)],
) -> TenantConfig:
    try:
        config = await services.config.get_config(db, slug)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    if config is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company '{slug}' not found",
        )
    return config


@router.put(
    "/{slug}/config",
    response_model=TenantConfig,
    summary="Save branding and replace all sections (editor only)",
)
async def put_config(
    slug: str,
    body: ConfigUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    services: Annotated[Services, Depends(get_services)],
    _editor: Annotated[str, Depends(require_tenant_editor)],
) -> TenantConfig:
    """
    The submitted section list replaces the stored one entirely. Section
    order is taken from the array position, not from any `order` field.
    Branding and sections are written in the same transaction.
    """
    try:
        return await services.config.save_config(db, slug, body)
    except TenantNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update config",
        )
