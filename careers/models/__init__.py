"""
models/__init__.py
------------------
Re-export all models so create_tables.py (and Alembic's env.py, if added)
can import Base and discover all tables via a single import:

    from careers.models import Base
"""

from careers.db.base import Base
from careers.models.tenant import Tenant
from careers.models.section import Section
from careers.models.job import Job

__all__ = ["Base", "Tenant", "Section", "Job"]
