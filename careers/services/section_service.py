"""
services/section_service.py
---------------------------
Section Replacer: the only write path for a tenant's content sections.

replace() discards every section the tenant owns and creates the submitted
list from scratch. The position in the submitted list becomes the stored
`order` (0, 1, 2, ...); whatever `order` the caller sent is ignored, so the
stored orders are always dense and zero-based.

The delete and the inserts run in the caller's session. With the request
session from get_db they commit or roll back together, so a failed insert
leaves the previous sections in place. Two editors saving at the same time
are not coordinated: the last commit wins.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.exceptions import TenantNotFoundError
from careers.core.logging import get_logger
from careers.models.section import Section
from careers.repositories.section_repository import SectionRepository
from careers.repositories.tenant_repository import TenantRepository
from careers.schemas.section import SectionInput

logger = get_logger(__name__)


class SectionReplacer:

    def __init__(self, tenants: TenantRepository, sections: SectionRepository) -> None:
        self._tenants = tenants
        self._sections = sections

    async def replace(
        self,
        db: AsyncSession,
        slug: str,
        sections: Sequence[SectionInput],
    ) -> list[Section]:
        """
        Replace the tenant's whole section list.

        Returns the persisted sections in submitted order. An empty list is
        valid and leaves the tenant with no sections.
        Raises TenantNotFoundError if the slug does not resolve.
        """
        tenant = await self._tenants.find_by_slug(db, slug)
        if tenant is None:
            raise TenantNotFoundError(slug)

        removed = await self._sections.delete_all_for_tenant(db, tenant.id)
        if not sections:
            logger.info("Sections cleared", slug=slug, removed=removed)
            return []

        created = await self._sections.insert_many(db, tenant.id, sections)
        logger.info("Sections replaced", slug=slug, removed=removed, count=len(created))
        return created
