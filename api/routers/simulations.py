"""
Simulation endpoints.

GET /simulations/          → Run every policy over the current queue
GET /simulations/{policy}  → Run one policy (fcfs, sjf, priority)

Simulations are read-only: the queue looks exactly the same before and
after, so these are plain GETs and can be repeated freely. Running the same
policy twice on an unchanged queue returns the same report.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_engine
from api.schemas.simulation import SimulationResponse
from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine
from spool.errors import EmptyQueue

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.get("/", response_model=list[SimulationResponse])
async def compare_policies(
    engine: SchedulerEngine = Depends(get_engine),
) -> list[SimulationResponse]:
    """Side-by-side reports for FCFS, SJF and Priority on the same jobs."""
    try:
        reports = engine.compare()
    except EmptyQueue as e:
        raise HTTPException(status_code=409, detail=str(e))
    return [SimulationResponse.from_report(r) for r in reports]


@router.get("/{policy}", response_model=SimulationResponse)
async def run_simulation(
    policy: SchedulingPolicy,
    engine: SchedulerEngine = Depends(get_engine),
) -> SimulationResponse:
    """
    Simulate one scheduling policy.

    An unknown policy name is rejected with 422 before this runs
    (FastAPI validates the path parameter against the enum).
    """
    try:
        report = engine.run(policy)
    except EmptyQueue as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SimulationResponse.from_report(report)
