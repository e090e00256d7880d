"""
services/config_service.py
--------------------------
Config Aggregator: the tenant's branding plus its ordered sections, as one
read model for the public careers page and the editor.

Also hosts the editor save, which updates branding, replaces the sections
and then re-reads the aggregate so the response is exactly what a
subsequent GET would return.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.exceptions import StorageError, TenantNotFoundError
from careers.core.logging import get_logger
from careers.repositories.section_repository import SectionRepository
from careers.repositories.tenant_repository import TenantRepository
from careers.schemas.config import ConfigUpdate, TenantConfig
from careers.schemas.section import SectionRead
from careers.schemas.tenant import TenantRead
from careers.services.branding import normalize_brand_color
from careers.services.section_service import SectionReplacer

logger = get_logger(__name__)


class ConfigService:

    def __init__(
        self,
        tenants: TenantRepository,
        sections: SectionRepository,
        replacer: SectionReplacer,
    ) -> None:
        self._tenants = tenants
        self._sections = sections
        self._replacer = replacer

    async def get_config(self, db: AsyncSession, slug: str) -> TenantConfig | None:
        """
        Return the aggregated config, or None if no tenant has this slug.
        Raises StorageError if the database call fails.
        """
        try:
            tenant = await self._tenants.find_by_slug(db, slug)
            if tenant is None:
                return None
            sections = await self._sections.list_by_tenant(db, tenant.id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load config", slug=slug, error=str(exc))
            raise StorageError(str(exc)) from exc

        tenant_read = TenantRead.model_validate(tenant)
        tenant_read.brand_color = normalize_brand_color(tenant_read.brand_color)
        return TenantConfig(
            tenant=tenant_read,
            sections=[SectionRead.model_validate(s) for s in sections],
        )

    async def save_config(
        self, db: AsyncSession, slug: str, data: ConfigUpdate
    ) -> TenantConfig:
        """
        Update branding, replace all sections, then return the fresh config.
        Raises TenantNotFoundError or StorageError.
        """
        try:
            await self._tenants.update_branding(db, slug, data.tenant)
            await self._replacer.replace(db, slug, data.sections)
        except SQLAlchemyError as exc:
            logger.error("Failed to save config", slug=slug, error=str(exc))
            raise StorageError(str(exc)) from exc

        config = await self.get_config(db, slug)
        if config is None:
            raise TenantNotFoundError(slug)
        return config
