"""
Health check endpoint.

This is the first thing you hit to verify the system is running.
There is no database or broker behind the spooler, so "healthy" means the
app started and its print queue exists.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_repository
from spool.repository import JobRepository

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    repository: JobRepository = Depends(get_repository),
) -> dict:
    """Report queue occupancy."""
    return {
        "status": "healthy",
        "jobs": len(repository),
        "max_jobs": repository.max_jobs,
    }
