"""
Print queue endpoints.

POST /jobs/  → Submit a new print job (appended to the queue)
GET  /jobs/  → The queue in arrival order (unsorted)

The API layer is intentionally thin:
- Validate the shape of the input (Pydantic does this automatically)
- Hand it to the repository
- Translate repository errors into HTTP status codes

It does NOT order or simulate anything; that's the scheduler engine's job.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_repository
from api.schemas.job import JobCreate, JobResponse, JobListResponse
from spool.errors import CapacityExceeded, InvalidJobParameters
from spool.repository import JobRepository

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
async def create_job(
    job_in: JobCreate,
    repository: JobRepository = Depends(get_repository),
) -> JobResponse:
    """
    Submit a new print job.

    - 422 if page_count or priority is not positive (the id is not consumed)
    - 409 if the queue is already at capacity
    """
    try:
        job = repository.add_job(job_in.page_count, job_in.priority)
    except InvalidJobParameters as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CapacityExceeded as e:
        raise HTTPException(status_code=409, detail=str(e))
    return JobResponse.model_validate(job)


@router.get("/", response_model=JobListResponse)
async def list_jobs(
    repository: JobRepository = Depends(get_repository),
) -> JobListResponse:
    """List every queued job in arrival order."""
    jobs = repository.list_jobs()
    return JobListResponse(
        jobs=[JobResponse.model_validate(j) for j in jobs],
        total=len(jobs),
        max_jobs=repository.max_jobs,
    )
