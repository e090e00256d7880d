"""
core/exceptions.py
------------------
Domain exceptions raised by the repository and service layers.

Routes translate these into HTTP responses:
  TenantNotFoundError      → 404
  TenantAlreadyExistsError → provisioning only (seed.py)
  StorageError             → 500

Missing or malformed request fields never reach the services: pydantic
rejects them and main.py answers 400.
"""


class CareersError(Exception):
    """Base class for all domain errors."""


class TenantNotFoundError(CareersError):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Tenant '{slug}' not found")


class TenantAlreadyExistsError(CareersError):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Tenant '{slug}' already exists")


class StorageError(CareersError):
    """The underlying persistence call failed."""
