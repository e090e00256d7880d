"""
repositories/job_repository.py
------------------------------
Catalog Store: job postings owned by a tenant.

Every query is scoped by tenant_id. Jobs are only ever inserted by the bulk
importer; the web service reads them.
"""

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from careers.models.job import Job


class JobRepository:

    async def find(
        self,
        db: AsyncSession,
        tenant_id: str,
        *,
        search: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> list[Job]:
        """
        All of a tenant's jobs matching every given filter, newest first.

        search   → case-insensitive substring of the title (taken literally,
                   '%' and '_' are not wildcards). Both sides are folded by
                   the database's lower(); SQLite only folds ASCII, so
                   "ÉCOLE" does not match "école" there. Postgres folds
                   per the database locale.
        location → exact, case-sensitive match
        job_type → exact, case-sensitive match
        """
        query = select(Job).where(Job.tenant_id == tenant_id)

        if search:
            query = query.where(
                Job.title.icontains(search, autoescape=True)
            )
        if location:
            query = query.where(Job.location == location)
        if job_type:
            query = query.where(Job.job_type == job_type)

        result = await db.execute(query.order_by(Job.id.desc()))
        return list(result.scalars().all())

    async def distinct_values(
        self, db: AsyncSession, tenant_id: str, column
    ) -> list[str]:
        result = await db.execute(
            select(column)
            .distinct()
            .where(Job.tenant_id == tenant_id, column != "")
            .order_by(column)
        )
        return list(result.scalars().all())

    async def insert_many(
        self,
        db: AsyncSession,
        tenant_id: str,
        rows: Sequence[Mapping[str, Any]],
    ) -> list[Job]:
        jobs = [
            Job(
                tenant_id=tenant_id,
                title=row["title"],
                location=row["location"],
                job_type=row["job_type"],
                description=row.get("description"),
            )
            for row in rows
        ]
        db.add_all(jobs)
        await db.flush()
        return jobs
