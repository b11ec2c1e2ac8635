"""Job application endpoints."""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_employer, get_current_job_seeker, get_storage
from jobconnect.core.exceptions import AuthorizationError, ConflictError, NotFoundError
from jobconnect.schemas import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    ApplicationWithJob,
    ApplicationWithJobSeeker,
    EmployerWithUser,
    JobSeekerWithUser,
)
from jobconnect.schemas.enums import JobStatus
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=ApplicationRead)
async def create_application(
    data: ApplicationCreate,
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    """Apply to an active job. Each job seeker may apply once per job."""
    job = await storage.get_job(data.job_id)
    if job is None:
        raise NotFoundError("Job not found")
    if job.job.status != JobStatus.ACTIVE:
        raise ConflictError("This job is no longer accepting applications")
    if await storage.find_application(data.job_id, job_seeker.job_seeker.id):
        raise ConflictError("You have already applied to this job")

    application = await storage.create_application(job_seeker.job_seeker.id, data.model_dump())
    logger.info(
        "application_created",
        application_id=str(application.id),
        job_id=str(data.job_id),
    )
    return application


@router.get("/job-seeker", response_model=List[ApplicationWithJob])
async def job_seeker_applications(
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_applications_by_job_seeker(job_seeker.job_seeker.id)


@router.get("/employer", response_model=List[ApplicationWithJobSeeker])
async def employer_applications(
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_applications_by_employer(employer.employer.id)


@router.put("/{application_id}/status", response_model=ApplicationRead)
async def update_application_status(
    application_id: UUID,
    data: ApplicationStatusUpdate,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Move an application through review. Only the job's employer may do this."""
    application = await storage.get_application(application_id)
    job = await storage.get_job(application.job_id) if application else None
    if job is None or job.job.employer_id != employer.employer.id:
        raise AuthorizationError("Application not found or unauthorized")

    updated = await storage.update_application_status(application_id, data.status, data.notes)
    logger.info(
        "application_status_updated", application_id=str(application_id), status=data.status
    )
    return updated
