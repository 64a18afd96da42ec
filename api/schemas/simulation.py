"""
Pydantic schemas for the /simulations endpoints.

JobMetricsResponse: one row of the results table.
SimulationResponse: a full report for one policy.
"""

from pydantic import BaseModel

from models.enums import SchedulingPolicy
from models.report import SimulationReport


class JobMetricsResponse(BaseModel):
    job_id: int
    page_count: int
    priority: int
    wait_time: int
    turnaround_time: int

    model_config = {"from_attributes": True}


class SimulationResponse(BaseModel):
    """Response body for GET /simulations/{policy}."""

    policy: SchedulingPolicy
    display_name: str
    jobs: list[JobMetricsResponse]   # in service order
    average_wait_time: float
    average_turnaround_time: float
    total_pages: int

    @classmethod
    def from_report(cls, report: SimulationReport) -> "SimulationResponse":
        policy = SchedulingPolicy(report.policy)
        return cls(
            policy=policy,
            display_name=policy.display_name,
            jobs=[JobMetricsResponse.model_validate(m) for m in report.jobs],
            average_wait_time=report.average_wait_time,
            average_turnaround_time=report.average_turnaround_time,
            total_pages=report.total_pages,
        )
