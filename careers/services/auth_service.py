"""
services/auth_service.py
------------------------
Editor login: compare a supplied admin key with the tenant's stored key.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.logging import get_logger
from careers.core.security import admin_key_matches
from careers.models.tenant import Tenant
from careers.repositories.tenant_repository import TenantRepository

logger = get_logger(__name__)


class AuthService:

    def __init__(self, tenants: TenantRepository) -> None:
        self._tenants = tenants

    async def authenticate(
        self, db: AsyncSession, slug: str, admin_key: str
    ) -> Tenant | None:
        """Return the tenant if the key matches exactly, else None."""
        tenant = await self._tenants.find_by_slug(db, slug)
        if tenant is None:
            logger.warning("Login for unknown tenant", slug=slug)
            return None
        if not admin_key_matches(admin_key, tenant.admin_key):
            logger.warning("Invalid admin key", slug=slug)
            return None
        return tenant
