"""
schemas/job.py
--------------
Pydantic models for the job catalog: filters, listing rows, filter options
and bulk-import results.
"""

from typing import Optional

from pydantic import field_validator

from careers.schemas.base import CamelModel


class JobFilters(CamelModel):
    """Optional candidate filters. Empty strings count as absent."""
    search: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None

    @field_validator("search", "location", "job_type")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class JobRead(CamelModel):
    id: int
    title: str
    location: str
    job_type: str
    description: Optional[str] = None


class JobFilterOptions(CamelModel):
    locations: list[str]
    job_types: list[str]


class ImportResult(CamelModel):
    slug: str
    tenant_created: bool
    received: int
    inserted: int
    skipped: int
