"""
services/import_service.py
--------------------------
Bulk job import used by seed.py.

Spreadsheet exports use inconsistent headers, so each row is mapped through
a small alias table before insert. Rows that end up without a title,
location or job type are skipped. If the target tenant does not exist yet it
is provisioned with the seed defaults from settings.
"""

from typing import Any, Iterable, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from careers.core.config import settings
from careers.core.logging import get_logger
from careers.repositories.job_repository import JobRepository
from careers.repositories.tenant_repository import TenantRepository
from careers.schemas.job import ImportResult

logger = get_logger(__name__)

HEADER_ALIASES = {
    "title": ("title", "Job Title", "jobTitle"),
    "location": ("location", "Location"),
    "job_type": ("jobType", "Job Type", "Type"),
    "description": ("description", "Description"),
}
DEFAULT_JOB_TYPE = "Full-time"


def _first_value(row: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        value = row.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def normalize_row(row: Mapping[str, Any]) -> dict | None:
    """Map a raw spreadsheet row onto job columns, or None if it is incomplete."""
    job = {
        "title": _first_value(row, HEADER_ALIASES["title"]),
        "location": _first_value(row, HEADER_ALIASES["location"]),
        "job_type": _first_value(row, HEADER_ALIASES["job_type"]) or DEFAULT_JOB_TYPE,
        "description": _first_value(row, HEADER_ALIASES["description"]),
    }
    if not (job["title"] and job["location"] and job["job_type"]):
        return None
    return job


class ImportService:

    def __init__(self, tenants: TenantRepository, jobs: JobRepository) -> None:
        self._tenants = tenants
        self._jobs = jobs

    async def import_jobs(
        self,
        db: AsyncSession,
        slug: str,
        rows: list[Mapping[str, Any]],
        chunk_size: int | None = None,
    ) -> ImportResult:
        chunk_size = chunk_size or settings.IMPORT_CHUNK_SIZE

        tenant = await self._tenants.find_by_slug(db, slug)
        created = tenant is None
        if tenant is None:
            tenant = await self._tenants.create(
                db,
                slug=slug,
                name=settings.SEED_COMPANY_NAME,
                admin_key=settings.SEED_ADMIN_KEY,
            )
        else:
            logger.info("Found existing tenant", slug=slug, name=tenant.name)

        cleaned = [job for job in (normalize_row(r) for r in rows) if job is not None]

        inserted = 0
        for start in range(0, len(cleaned), chunk_size):
            chunk = cleaned[start:start + chunk_size]
            await self._jobs.insert_many(db, tenant.id, chunk)
            inserted += len(chunk)
            logger.info("Inserted jobs", slug=slug, progress=f"{inserted}/{len(cleaned)}")

        return ImportResult(
            slug=slug,
            tenant_created=created,
            received=len(rows),
            inserted=inserted,
            skipped=len(rows) - len(cleaned),
        )
