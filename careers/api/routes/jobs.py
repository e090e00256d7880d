"""
api/routes/jobs.py
------------------
Public job listing endpoints.

GET /companies/{slug}/jobs          — Filtered job list, newest first.
GET /companies/{slug}/jobs/options  — Distinct locations and job types.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.logging import get_logger
from careers.db.session import get_db
from careers.dependencies import get_services
from careers.models.tenant import Tenant
from careers.schemas.job import JobFilterOptions, JobFilters, JobRead
from careers.services.container import Services

logger = get_logger(__name__)

router = APIRouter(prefix="/companies", tags=["Jobs"])


async def _tenant_or_404(db: AsyncSession, services: Services, slug: str) -> Tenant | None:
    """
    Resolve the tenant for a public listing. Unknown slug → 404; a storage
    failure is logged and returns None so the caller can answer with an
    empty result instead of an error page.
    """
    try:
        tenant = await services.tenants.find_by_slug(db, slug)
    except SQLAlchemyError as exc:
        logger.error("Tenant lookup failed, returning empty result", slug=slug, error=str(exc))
        await db.rollback()
        return None
    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company '{slug}' not found",
        )
    return tenant


@router.get(
    "/{slug}/jobs",
    response_model=list[JobRead],
    summary="List a tenant's jobs with optional filters",
)
async def list_jobs(
    slug: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    services: Annotated[Services, Depends(get_services)],
    search: Optional[str] = Query(default=None, description="Case-insensitive title substring"),
    location: Optional[str] = Query(default=None, description="Exact location"),
    job_type: Optional[str] = Query(default=None, alias="jobType", description="Exact job type"),
) -> list[JobRead]:
    """All filters are optional and combined with AND. No pagination."""
    tenant = await _tenant_or_404(db, services, slug)
    if tenant is None:
        return []
    filters = JobFilters(search=search, location=location, job_type=job_type)
    jobs = await services.job_filter.filter(db, tenant.id, filters)
    return [JobRead.model_validate(j) for j in jobs]


@router.get(
    "/{slug}/jobs/options",
    response_model=JobFilterOptions,
    summary="Distinct filter values for a tenant's jobs",
)
async def job_options(
    slug: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    services: Annotated[Services, Depends(get_services)],
) -> JobFilterOptions:
    tenant = await _tenant_or_404(db, services, slug)
    if tenant is None:
        return JobFilterOptions(locations=[], job_types=[])
    return await services.job_filter.options(db, tenant.id)
