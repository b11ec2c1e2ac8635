"""Interview scheduling endpoints."""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_employer, get_current_job_seeker, get_storage
from jobconnect.core.exceptions import AuthorizationError, ConflictError
from jobconnect.schemas import (
    EmployerWithUser,
    InterviewRead,
    InterviewSchedule,
    InterviewUpdate,
    InterviewWithDetails,
    JobSeekerWithUser,
)
from jobconnect.schemas.enums import InterviewStatus, can_transition_interview
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=InterviewRead)
async def schedule_interview(
    data: InterviewSchedule,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Schedule an interview for an application to one of the employer's jobs."""
    application = await storage.get_application(data.application_id)
    job = await storage.get_job(application.job_id) if application else None
    if job is None or job.job.employer_id != employer.employer.id:
        raise AuthorizationError("Application not found or unauthorized")

    interview = await storage.create_interview(
        {
            **data.model_dump(),
            "employer_id": employer.employer.id,
            "job_seeker_id": application.job_seeker_id,
            "status": InterviewStatus.SCHEDULED.value,
        }
    )
    logger.info(
        "interview_scheduled",
        interview_id=str(interview.id),
        application_id=str(application.id),
        scheduled_at=interview.scheduled_at.isoformat(),
    )
    return interview


@router.put("/{interview_id}", response_model=InterviewRead)
async def update_interview(
    interview_id: UUID,
    data: InterviewUpdate,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    """Change an interview's status and record feedback."""
    interview = await storage.get_interview(interview_id)
    if interview is None or interview.employer_id != employer.employer.id:
        raise AuthorizationError("Interview not found or unauthorized")

    if not can_transition_interview(interview.status, data.status):
        raise ConflictError(
            f"Cannot change interview status from {interview.status.value} to {data.status}"
        )

    updates = data.model_dump(exclude_unset=True)
    if updates.get("scheduled_at") is None:
        updates.pop("scheduled_at", None)

    updated = await storage.update_interview(interview_id, updates, interview.status.value)
    logger.info(
        "interview_updated",
        interview_id=str(interview_id),
        from_status=interview.status.value,
        to_status=data.status,
    )
    return updated


@router.get("/job-seeker", response_model=List[InterviewWithDetails])
async def job_seeker_interviews(
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_interviews_by_job_seeker(job_seeker.job_seeker.id)


@router.get("/employer", response_model=List[InterviewWithDetails])
async def employer_interviews(
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_interviews_by_employer(employer.employer.id)
