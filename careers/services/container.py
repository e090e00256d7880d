"""
services/container.py
---------------------
Builds the repositories and services once at startup.

The repositories are stateless (every call takes the request session), so
one instance of each is shared by every service that needs it. The
application factory stores the result on app.state; seed.py builds its own.
"""

from dataclasses import dataclass

from careers.repositories.job_repository import JobRepository
from careers.repositories.section_repository import SectionRepository
from careers.repositories.tenant_repository import TenantRepository
from careers.services.auth_service import AuthService
from careers.services.config_service import ConfigService
from careers.services.import_service import ImportService
from careers.services.job_service import JobFilterEngine
from careers.services.section_service import SectionReplacer


@dataclass(frozen=True)
class Services:
    tenants: TenantRepository
    sections: SectionRepository
    jobs: JobRepository
    replacer: SectionReplacer
    config: ConfigService
    job_filter: JobFilterEngine
    auth: AuthService
    importer: ImportService


def build_services() -> Services:
    tenants = TenantRepository()
    sections = SectionRepository()
    jobs = JobRepository()
    replacer = SectionReplacer(tenants, sections)
    return Services(
        tenants=tenants,
        sections=sections,
        jobs=jobs,
        replacer=replacer,
        config=ConfigService(tenants, sections, replacer),
        job_filter=JobFilterEngine(jobs),
        auth=AuthService(tenants),
        importer=ImportService(tenants, jobs),
    )
