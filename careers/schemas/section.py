"""
schemas/section.py
------------------
Pydantic models for content sections.

SectionInput.order is accepted so editors can post back what they read,
but it is ignored: the list position decides the stored order.
"""

from typing import Optional

from pydantic import Field

from careers.schemas.base import CamelModel


class SectionInput(CamelModel):
    type: str = Field(..., min_length=1, max_length=50, examples=["about", "life", "custom"])
    title: str = Field(..., max_length=255)
    content: str
    order: Optional[int] = None


class SectionRead(CamelModel):
    id: int
    type: str
    title: str
    content: str
    order: int
