"""API routes for job postings."""

from fastapi import APIRouter, Depends, Query, status

from careerpilot.core.auth import CurrentUser, get_current_user
from careerpilot.core.exceptions import ValidationError
from careerpilot.schemas.common import ApiResponse
from careerpilot.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from careerpilot.services.job_service import JobService, get_job_service
from careerpilot.utils.filters import JobFilter
from careerpilot.utils.validators import parse_salary_range

router = APIRouter(prefix="/jobs", tags=["jobs"])


class JobListResponse(ApiResponse[list[JobResponse]]):
    """Job list with a result count."""

    count: int = 0


@router.post(
    "",
    response_model=ApiResponse[JobResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_job(
    request: JobCreateRequest,
    user: CurrentUser = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    """Post a new job."""
    job = await service.create(user, request.model_dump())
    return ApiResponse(data=JobResponse.model_validate(job))


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: str | None = Query(default=None, description="Title, company or skill"),
    job_type: str | None = Query(default=None, alias="jobType"),
    location: str | None = Query(default=None),
    experience: str | None = Query(default=None),
    salary: str | None = Query(default=None, description="Thousands, e.g. 50-100"),
    service: JobService = Depends(get_job_service),
):
    """Browse jobs; no authentication required."""
    if salary and parse_salary_range(salary) is None:
        raise ValidationError("Salary filter must look like '50-100'")

    job_filter = JobFilter(
        search=search,
        job_type=job_type,
        location=location,
        experience=experience,
        salary=salary,
    )
    jobs = await service.list(job_filter)
    return JobListResponse(
        data=[JobResponse.model_validate(job) for job in jobs],
        count=len(jobs),
    )


@router.get("/{job_id}", response_model=ApiResponse[JobResponse])
async def get_job(
    job_id: str,
    service: JobService = Depends(get_job_service),
):
    job = await service.get(job_id)
    return ApiResponse(data=JobResponse.model_validate(job))


@router.put("/{job_id}", response_model=ApiResponse[JobResponse])
async def update_job(
    job_id: str,
    request: JobUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    """Edit a job (poster or admin only)."""
    job = await service.update(user, job_id, request.model_dump(exclude_unset=True))
    return ApiResponse(data=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=ApiResponse[dict])
async def delete_job(
    job_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    """Delete a job (poster or admin only)."""
    await service.delete(user, job_id)
    return ApiResponse(data={})


@router.put("/{job_id}/save", response_model=ApiResponse[JobResponse])
async def toggle_save_job(
    job_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: JobService = Depends(get_job_service),
):
    """Bookmark or un-bookmark a job."""
    job = await service.toggle_save(user, job_id)
    return ApiResponse(data=JobResponse.model_validate(job))
