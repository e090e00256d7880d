"""
schemas/tenant.py
-----------------
Pydantic request/response models for Tenant branding.

Naming convention:
  BrandingUpdate → inbound request body (editor save)
  TenantRead     → outbound response body (never exposes admin_key)
"""

from typing import Optional

from pydantic import Field

from careers.schemas.base import CamelModel


class BrandingUpdate(CamelModel):
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["Acme Corp"],
        description="Company display name",
    )
    logo_url: Optional[str] = Field(default=None, max_length=2048)
    banner_url: Optional[str] = Field(default=None, max_length=2048)
    brand_color: Optional[str] = Field(
        default=None,
        max_length=32,
        examples=["#2563eb", "ff0000"],
        description="Hex colour; a missing '#' is added, empty falls back to the default",
    )
    culture_video_url: Optional[str] = Field(default=None, max_length=2048)


class TenantRead(CamelModel):
    id: str
    slug: str
    name: str
    logo_url: str
    banner_url: str
    brand_color: str
    culture_video_url: str
