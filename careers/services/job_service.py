"""
services/job_service.py
-----------------------
Job Filter Engine for the public job listing.

Filters are optional and AND-combined (see JobRepository.find for the
matching rules). Results are newest first and never paginated.

This is a public read path: if the database call fails the error is
logged and an empty list is returned instead of an error page.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.logging import get_logger
from careers.models.job import Job
from careers.repositories.job_repository import JobRepository
from careers.schemas.job import JobFilterOptions, JobFilters

logger = get_logger(__name__)


class JobFilterEngine:

    def __init__(self, jobs: JobRepository) -> None:
        self._jobs = jobs

    async def filter(
        self,
        db: AsyncSession,
        tenant_id: str,
        filters: JobFilters | None = None,
    ) -> list[Job]:
        filters = filters or JobFilters()
        try:
            return await self._jobs.find(
                db,
                tenant_id,
                search=filters.search,
                location=filters.location,
                job_type=filters.job_type,
            )
        except SQLAlchemyError as exc:
            logger.error(
                "Job filter failed, returning empty list",
                tenant_id=tenant_id,
                error=str(exc),
            )
            await db.rollback()
            return []

    async def options(self, db: AsyncSession, tenant_id: str) -> JobFilterOptions:
        """Distinct locations and job types, for the filter dropdowns."""
        try:
            locations = await self._jobs.distinct_values(db, tenant_id, Job.location)
            job_types = await self._jobs.distinct_values(db, tenant_id, Job.job_type)
        except SQLAlchemyError as exc:
            logger.error("Job options failed", tenant_id=tenant_id, error=str(exc))
            await db.rollback()
            return JobFilterOptions(locations=[], job_types=[])
        return JobFilterOptions(locations=locations, job_types=job_types)
