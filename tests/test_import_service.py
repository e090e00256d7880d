"""
Tests for careers/services/import_service.py (bulk job import).
"""

import uuid

import pytest

from careers.services.import_service import normalize_row


class TestNormalizeRow:

    def test_spreadsheet_headers_are_mapped(self):
        row = {"Job Title": "Engineer", "Location": "NYC", "Job Type": "Contract", "Description": "Build"}

        assert normalize_row(row) == {
            "title": "Engineer",
            "location": "NYC",
            "job_type": "Contract",
            "description": "Build",
        }

    def test_job_type_defaults_to_full_time(self):
        job = normalize_row({"title": "Engineer", "location": "NYC"})

        assert job["job_type"] == "Full-time"
        assert job["description"] is None

    @pytest.mark.parametrize(
        "row",
        [
            {"title": "", "location": "NYC"},
            {"title": "Engineer", "location": "   "},
            {"Location": "NYC"},
        ],
    )
    def test_incomplete_rows_are_dropped(self, row):
        assert normalize_row(row) is None


class TestImportJobs:

    @pytest.mark.asyncio
    async def test_provisions_missing_tenant(self, db, services):
        rows = [
            {"title": "Engineer", "location": "NYC", "jobType": "Full-time"},
            {"title": "", "location": "SF"},
        ]

        result = await services.importer.import_jobs(db, "initech", rows)
        await db.commit()

        assert result.tenant_created is True
        assert result.received == 2
        assert result.inserted == 1
        assert result.skipped == 1

        tenant = await services.tenants.find_by_slug(db, "initech")
        assert tenant.name == "Acme Corp"
        assert tenant.admin_key == "acme123@"
        assert tenant.brand_color == "#2563eb"
        assert str(uuid.UUID(tenant.id)) == tenant.id

    @pytest.mark.asyncio
    async def test_appends_to_existing_tenant_in_chunks(self, db, services, tenant):
        rows = [{"title": f"Job {i}", "location": "Remote"} for i in range(5)]

        result = await services.importer.import_jobs(db, "acme", rows, chunk_size=2)
        await db.commit()

        assert result.tenant_created is False
        assert result.inserted == 5
        jobs = await services.job_filter.filter(db, tenant.id)
        assert [j.title for j in jobs] == ["Job 4", "Job 3", "Job 2", "Job 1", "Job 0"]

