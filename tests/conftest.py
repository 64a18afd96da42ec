"""
Shared test fixtures.

The spooler keeps everything in memory, so there is no infrastructure to
fake. Each test simply gets its own JobRepository:
- repository: empty queue with a small capacity
- sample_repository: the three-job example (ids 1, 2, 3)
- client: httpx.AsyncClient with ASGI transport talking to the FastAPI app
  (no HTTP server or network involved)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_repository
from spool.repository import JobRepository

SAMPLE_JOBS = [(10, 2), (5, 1), (20, 3)]  # (page_count, priority)


@pytest.fixture
def repository() -> JobRepository:
    """A fresh, empty print queue with room for 5 jobs."""
    return JobRepository(max_jobs=5)


@pytest.fixture
def sample_repository() -> JobRepository:
    """Queue holding the classic example: 10p/prio 2, 5p/prio 1, 20p/prio 3."""
    repo = JobRepository(max_jobs=100)
    for page_count, priority in SAMPLE_JOBS:
        repo.add_job(page_count, priority)
    return repo


@pytest_asyncio.fixture
async def client(repository):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the repository built in
    the lifespan hook, use this test's repository". ASGITransport does not
    run the lifespan, so the override is what gives the app its queue.
    """
    app = create_app()

    async def override_get_repository():
        return repository

    app.dependency_overrides[get_repository] = override_get_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
