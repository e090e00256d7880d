"""
repositories/section_repository.py
----------------------------------
Section Store: ordered content blocks owned by a tenant.

delete_all_for_tenant and insert_many are only meant to be called together,
by SectionReplacer. Calling one without the other would leave a tenant's
section list half-replaced.
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from careers.models.section import Section
from careers.schemas.section import SectionInput


class SectionRepository:

    async def list_by_tenant(self, db: AsyncSession, tenant_id: str) -> list[Section]:
        """Sections in display order; rows sharing an order keep insertion order."""
        result = await db.execute(
            select(Section)
            .where(Section.tenant_id == tenant_id)
            .order_by(Section.order.asc(), Section.id.asc())
        )
        return list(result.scalars().all())

    async def delete_all_for_tenant(self, db: AsyncSession, tenant_id: str) -> int:
        result = await db.execute(
            delete(Section).where(Section.tenant_id == tenant_id)
        )
        return result.rowcount

    async def insert_many(
        self,
        db: AsyncSession,
        tenant_id: str,
        sections: Sequence[SectionInput],
    ) -> list[Section]:
        """Insert sections with order = list index. Caller-supplied order is ignored."""
        rows = [
            Section(
                tenant_id=tenant_id,
                type=s.type,
                title=s.title,
                content=s.content,
                order=index,
            )
            for index, s in enumerate(sections)
        ]
        db.add_all(rows)
        await db.flush()
        return rows
