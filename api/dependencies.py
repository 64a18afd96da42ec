"""
FastAPI dependency injection.

How this works:
- An endpoint declares `repository: JobRepository = Depends(get_repository)`
- FastAPI calls get_repository() before your endpoint runs
- Your endpoint receives the one repository built at startup

Tests override these to hand each test a fresh, empty queue.
"""

from fastapi import Depends, Request

from scheduler.engine import SchedulerEngine
from spool.repository import JobRepository


async def get_repository(request: Request) -> JobRepository:
    """Returns the JobRepository stored on the app during startup."""
    return request.app.state.repository


async def get_engine(
    repository: JobRepository = Depends(get_repository),
) -> SchedulerEngine:
    """A SchedulerEngine bound to the current repository."""
    return SchedulerEngine(repository)
