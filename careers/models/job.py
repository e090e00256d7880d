"""
models/job.py
-------------
Job posting ORM model.

Jobs are written by the bulk importer only and are read-only for the web
service. location and job_type are matched exactly by the job filter, so
they are stored exactly as imported. The integer id grows with every insert
and defines "newest first" ordering.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careers.db.base import Base, TimestampMixin


class Job(Base, TimestampMixin):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="jobs")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Job id={self.id} tenant_id={self.tenant_id} title={self.title}>"
