"""
Pydantic schemas for the /jobs endpoints.

These are NOT the core PrintJob type. They define the HTTP API contract:
- JobCreate: what the user sends when submitting a print job (request body)
- JobResponse: what we send back for a single job (response body)
- JobListResponse: the whole queue in arrival order

Positivity is NOT checked here. The repository owns that rule (and the id
rollback that goes with it), so the router lets it decide and maps its
InvalidJobParameters error to a 422.
"""

from pydantic import BaseModel, Field


class JobCreate(BaseModel):
    """Request body for POST /jobs/."""

    page_count: int = Field(
        ...,
        description="Number of pages to print (the job's service time)",
        examples=[50],
    )
    priority: int = Field(
        ...,
        description="1 = Faculty, 2 = Student, 3 = Guest (lower runs first)",
        examples=[2],
    )


class JobResponse(BaseModel):
    """Response body for a single job."""

    job_id: int
    page_count: int
    priority: int

    # read straight from the PrintJob dataclass attributes
    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    """The print queue, returned by GET /jobs/."""

    jobs: list[JobResponse]
    total: int       # jobs currently queued
    max_jobs: int    # configured capacity
