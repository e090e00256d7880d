"""
services/branding.py
--------------------
Brand colour normalisation, applied when branding is written and again
every time the configuration is read (rows written by other tools, e.g. a
manual database edit, may lack the '#').
"""

from typing import Optional

from careers.core.config import settings


def normalize_brand_color(value: Optional[str]) -> str:
    """
    Return a '#'-prefixed colour.

        None / ""  → settings.DEFAULT_BRAND_COLOR ("#2563eb")
        "#ff0000"  → "#ff0000"
        "ff0000"   → "#ff0000"

    Idempotent: normalising an already normalised value returns it unchanged.
    """
    if not value:
        return settings.DEFAULT_BRAND_COLOR
    if value.startswith("#"):
        return value
    return "#" + value
