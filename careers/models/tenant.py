"""
models/tenant.py
----------------
Tenant (company) ORM model.

Each tenant is one recruiting organisation with its own branding, content
sections and job catalog. The slug is the only external lookup key: it is
unique, used in every public URL and never changed after creation.

Sections and jobs point at their tenant through tenant_id; that foreign key
is the single source of truth for ownership. The tenant keeps no list of
section ids of its own.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careers.core.config import settings
from careers.db.base import Base, TimestampMixin, generate_uuid


class Tenant(Base, TimestampMixin):
    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_uuid
    )
    slug: Mapped[str] = mapped_column(String(63), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Branding
    logo_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    banner_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    brand_color: Mapped[str] = mapped_column(
        String(32), nullable=False, default=lambda: settings.DEFAULT_BRAND_COLOR
    )
    culture_video_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")

    # Shared editor secret, compared verbatim (never hashed, never returned)
    admin_key: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    sections: Mapped[list["Section"]] = relationship(  # noqa: F821
        "Section", back_populates="tenant", lazy="raise"
    )
    jobs: Mapped[list["Job"]] = relationship(  # noqa: F821
        "Job", back_populates="tenant", lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<Tenant id={self.id} slug={self.slug}>"
