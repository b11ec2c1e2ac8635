"""Job posting endpoints."""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query

from jobconnect.core.deps import get_current_employer, get_storage
from jobconnect.core.exceptions import AuthorizationError, NotFoundError
from jobconnect.core.validation import validate_or_raise
from jobconnect.schemas import (
    EmployerWithUser,
    JobPosting,
    JobRead,
    JobUpdate,
    JobWithEmployer,
    SuccessResponse,
)
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


async def get_owned_job(job_id: UUID, employer: EmployerWithUser, storage: Storage) -> JobRead:
    """Load a job the acting employer owns; anything else is reported as not found."""
    job = await storage.get_job(job_id)
    if job is None or job.job.employer_id != employer.employer.id:
        raise AuthorizationError("Job not found or unauthorized")
    return job.job


@router.get("", response_model=List[JobWithEmployer])
async def list_jobs(
    search: Optional[str] = None,
    location: Optional[str] = None,
    employment_type: Optional[str] = Query(None, alias="employmentType"),
    storage: Storage = Depends(get_storage),
):
    """List active jobs, newest first."""
    return await storage.list_jobs(search, location, employment_type)


@router.get("/employer/my-jobs", response_model=List[JobRead])
async def my_jobs(
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """All jobs of the acting employer, any status."""
    return await storage.get_jobs_by_employer(employer.employer.id)


@router.get("/{job_id}", response_model=JobWithEmployer)
async def get_job(job_id: UUID, storage: Storage = Depends(get_storage)):
    job = await storage.get_job(job_id)
    if job is None:
        raise NotFoundError("Job not found")
    return job


@router.post("", response_model=JobRead)
async def create_job(
    data: JobPosting,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Post a new job. New jobs are always active."""
    job = await storage.create_job(employer.employer.id, data.model_dump())
    logger.info("job_created", job_id=str(job.id), employer_id=str(employer.employer.id))
    return job


@router.put("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: UUID,
    data: JobUpdate,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Apply a partial update to an owned job."""
    job = await get_owned_job(job_id, employer, storage)
    sent = data.model_dump(exclude_unset=True, exclude={"status"})

    # The merged job must still be a valid posting (e.g. salary range)
    merged = validate_or_raise(JobPosting, {**job.posting_fields(), **sent})
    updates = merged.model_dump(include=set(sent))
    if data.status is not None:
        updates["status"] = data.status

    updated = await storage.update_job(job.id, updates)
    logger.info("job_updated", job_id=str(job.id), fields=sorted(updates))
    return updated


@router.delete("/{job_id}", response_model=SuccessResponse)
async def delete_job(
    job_id: UUID,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Delete an owned job together with its applications and interviews."""
    job = await get_owned_job(job_id, employer, storage)
    await storage.delete_job(job.id)
    logger.info("job_deleted", job_id=str(job.id))
    return SuccessResponse()
