"""
models/section.py
-----------------
Content section ORM model.

A section is one block of free text on a tenant's careers page ("about",
"life", "custom", or anything else; the type is not validated here).

Sections are never edited one by one. The only write path is replacing the
tenant's whole list (see services/section_service.py), which re-numbers
`order` from 0 on every save. The integer id grows with every insert and is
used as a tie-break when two rows share an `order` value.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careers.db.base import Base, TimestampMixin


class Section(Base, TimestampMixin):
    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)

    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="sections")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Section id={self.id} tenant_id={self.tenant_id} order={self.order}>"
