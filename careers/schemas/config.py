"""
schemas/config.py
-----------------
The aggregated tenant configuration: branding plus ordered sections.
This is the single read model used by the public page and the editor.
"""

from pydantic import AliasChoices, Field

from careers.schemas.base import CamelModel
from careers.schemas.section import SectionInput, SectionRead
from careers.schemas.tenant import BrandingUpdate, TenantRead


class ConfigUpdate(CamelModel):
    """Editor save: branding and the complete new section list."""
    tenant: BrandingUpdate = Field(validation_alias=AliasChoices("tenant", "company"))
    sections: list[SectionInput]


class TenantConfig(CamelModel):
    tenant: TenantRead
    sections: list[SectionRead]
