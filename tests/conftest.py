"""
Pytest fixtures shared by the repository, service and route tests.
"""

import os

# IMPORTANT: Set environment variables BEFORE any imports from careers
# so Settings (and the module-level engine in careers.db.session) pick them up.
os.environ["SECRET_KEY"] = "test-secret-key-1234"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_ENV"] = "test"
os.environ["DEBUG"] = "false"

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from careers.core.security import create_access_token
from careers.db.session import get_db
from careers.models import Base, Job, Tenant
from careers.services.container import build_services


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test, shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def services():
    return build_services()


@pytest_asyncio.fixture
async def tenant(db):
    """An 'acme' tenant with a brand colour stored without its '#'."""
    tenant = Tenant(
        slug="acme",
        name="Acme Corp",
        admin_key="acme123@",
        brand_color="ff0000",
        logo_url="https://cdn.example.com/acme.png",
    )
    db.add(tenant)
    await db.commit()
    return tenant


@pytest_asyncio.fixture
async def add_jobs(db):
    """Insert jobs one by one so ids follow the given sequence."""
    async def _add(tenant_id: str, *specs: dict) -> list[Job]:
        jobs = []
        for spec in specs:
            job = Job(tenant_id=tenant_id, **spec)
            db.add(job)
            await db.flush()
            jobs.append(job)
        await db.commit()
        return jobs
    return _add


# =============================================================================
# HTTP CLIENT
# =============================================================================


@pytest_asyncio.fixture
async def client(session_factory, tenant):
    """
    Async HTTP client bound to the app, with get_db pointed at the test
    database. The 'acme' tenant already exists.
    """
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Bearer token for the 'acme' tenant."""
    return {"Authorization": f"Bearer {create_access_token('acme')}"}
