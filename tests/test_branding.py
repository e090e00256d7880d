"""
Unit tests for careers/services/branding.py
"""

import pytest

from careers.services.branding import normalize_brand_color


class TestNormalizeBrandColor:

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_colour_falls_back_to_default(self, value):
        assert normalize_brand_color(value) == "#2563eb"

    def test_adds_missing_hash(self):
        assert normalize_brand_color("ff0000") == "#ff0000"

    def test_prefixed_colour_is_unchanged(self):
        assert normalize_brand_color("#ff0000") == "#ff0000"

    def test_is_idempotent(self):
        once = normalize_brand_color("abc123")
        assert normalize_brand_color(once) == once == "#abc123"
