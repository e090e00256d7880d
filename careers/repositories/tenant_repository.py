"""
repositories/tenant_repository.py
---------------------------------
Tenant Store: lookup by slug, branding updates and provisioning.

Repositories hold no connection state. Every method takes the
request-scoped AsyncSession, so a single instance is built at startup and
shared by every service that needs it.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.exceptions import TenantAlreadyExistsError, TenantNotFoundError
from careers.core.logging import get_logger
from careers.models.tenant import Tenant
from careers.schemas.tenant import BrandingUpdate
from careers.services.branding import normalize_brand_color

logger = get_logger(__name__)


class TenantRepository:

    async def find_by_slug(self, db: AsyncSession, slug: str) -> Tenant | None:
        result = await db.execute(select(Tenant).where(Tenant.slug == slug))
        return result.scalar_one_or_none()

    async def update_branding(
        self, db: AsyncSession, slug: str, data: BrandingUpdate
    ) -> Tenant:
        """
        Overwrite the tenant's branding fields.

        Missing URL fields are stored as "" (never NULL) and the brand
        colour is normalised before it is written.
        Raises TenantNotFoundError if the slug does not resolve.
        """
        tenant = await self.find_by_slug(db, slug)
        if tenant is None:
            raise TenantNotFoundError(slug)

        tenant.name = data.name
        tenant.logo_url = data.logo_url or ""
        tenant.banner_url = data.banner_url or ""
        tenant.brand_color = normalize_brand_color(data.brand_color)
        tenant.culture_video_url = data.culture_video_url or ""
        await db.flush()

        logger.info("Branding updated", slug=slug, brand_color=tenant.brand_color)
        return tenant

    async def create(
        self,
        db: AsyncSession,
        *,
        slug: str,
        name: str,
        admin_key: str,
        brand_color: str | None = None,
    ) -> Tenant:
        """
        Provision a new tenant.
        Raises TenantAlreadyExistsError if the slug is taken.
        """
        tenant = Tenant(
            slug=slug,
            name=name,
            admin_key=admin_key,
            brand_color=normalize_brand_color(brand_color),
        )
        db.add(tenant)
        try:
            await db.flush()  # Trigger DB constraints before commit
        except IntegrityError:
            await db.rollback()
            raise TenantAlreadyExistsError(slug)
        logger.info("Tenant created", tenant_id=tenant.id, slug=slug)
        return tenant
