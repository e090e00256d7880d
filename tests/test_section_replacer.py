"""
Tests for careers/services/section_service.py and the Section Store.

The replacer must discard every section the tenant owns, re-number the new
ones from the array position and leave other tenants alone.
"""

import pytest

from careers.core.exceptions import TenantNotFoundError
from careers.models import Section, Tenant
from careers.schemas.section import SectionInput


def _section(title: str, order: int | None = None, type_: str = "custom") -> SectionInput:
    return SectionInput(type=type_, title=title, content=f"{title} body", order=order)


class TestReplace:

    @pytest.mark.asyncio
    async def test_order_comes_from_array_position(self, db, services, tenant):
        created = await services.replacer.replace(
            db,
            "acme",
            [_section("A", order=5), _section("B", order=1), _section("C", order=9)],
        )
        await db.commit()

        assert [s.title for s in created] == ["A", "B", "C"]
        assert [s.order for s in created] == [0, 1, 2]

        stored = await services.sections.list_by_tenant(db, tenant.id)
        assert [(s.title, s.order) for s in stored] == [("A", 0), ("B", 1), ("C", 2)]

    @pytest.mark.asyncio
    async def test_replaces_previous_sections(self, db, services, tenant):
        await services.replacer.replace(db, "acme", [_section("Old 1"), _section("Old 2")])
        await db.commit()

        await services.replacer.replace(db, "acme", [_section("New")])
        await db.commit()

        stored = await services.sections.list_by_tenant(db, tenant.id)
        assert [(s.title, s.order) for s in stored] == [("New", 0)]

    @pytest.mark.asyncio
    async def test_empty_list_clears_sections(self, db, services, tenant):
        await services.replacer.replace(db, "acme", [_section("About")])
        await db.commit()

        result = await services.replacer.replace(db, "acme", [])
        await db.commit()

        assert result == []
        assert await services.sections.list_by_tenant(db, tenant.id) == []

    @pytest.mark.asyncio
    async def test_unknown_tenant_raises(self, db, services):
        with pytest.raises(TenantNotFoundError):
            await services.replacer.replace(db, "doesnotexist", [_section("About")])

    @pytest.mark.asyncio
    async def test_other_tenants_keep_their_sections(self, db, services, tenant):
        other = Tenant(slug="globex", name="Globex", admin_key="k")
        db.add(other)
        await db.commit()
        await services.replacer.replace(db, "globex", [_section("Globex about")])
        await db.commit()

        await services.replacer.replace(db, "acme", [])
        await db.commit()

        stored = await services.sections.list_by_tenant(db, other.id)
        assert [s.title for s in stored] == ["Globex about"]

    @pytest.mark.asyncio
    async def test_content_is_stored_verbatim(self, db, services, tenant):
        content = "Line one\n\n  indented line two\n"
        await services.replacer.replace(
            db, "acme", [SectionInput(type="life", title="Life", content=content)]
        )
        await db.commit()

        stored = await services.sections.list_by_tenant(db, tenant.id)
        assert stored[0].content == content
        assert stored[0].type == "life"


class TestListByTenant:

    @pytest.mark.asyncio
    async def test_duplicate_order_falls_back_to_insertion_order(self, db, services, tenant):
        # Rows written outside the replacer may share an order value.
        for title, order in [("second", 1), ("first", 0), ("also-second", 1)]:
            db.add(Section(tenant_id=tenant.id, type="custom", title=title, content="", order=order))
            await db.flush()
        await db.commit()

        stored = await services.sections.list_by_tenant(db, tenant.id)
        assert [s.title for s in stored] == ["first", "second", "also-second"]
