"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (build the in-memory print queue)
3. Registers all routers (jobs, simulations, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.
It replaces the older @app.on_event("startup") pattern.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from spool.repository import JobRepository
from api.routers import jobs, simulations, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    Startup:
    - Builds the one JobRepository this process will use, sized from settings

    Shutdown:
    - Nothing to release; all state is in memory and goes away with the process
    """
    app.state.repository = JobRepository(max_jobs=settings.MAX_JOBS)
    logger.info(f"API ready, print queue capacity: {settings.MAX_JOBS}")

    yield

    logger.info(f"API shut down with {len(app.state.repository)} jobs in queue")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Print Spooler",
        description="Print queue simulator comparing FCFS, SJF and Priority scheduling",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
