"""Profile update endpoints."""

import structlog
from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_employer, get_current_job_seeker, get_storage
from jobconnect.schemas import (
    EmployerProfileUpdate,
    EmployerWithUser,
    JobSeekerProfileUpdate,
    JobSeekerWithUser,
)
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.put("/job-seeker", response_model=JobSeekerWithUser)
async def update_job_seeker_profile(
    data: JobSeekerProfileUpdate,
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    user_updates = data.user_updates()
    profile_updates = data.profile_updates()
    updated = await storage.update_job_seeker_profile(
        job_seeker.job_seeker.id, user_updates, profile_updates
    )

    logger.info(
        "profile_updated",
        user_id=str(job_seeker.user.id),
        fields=sorted({**user_updates, **profile_updates}),
    )
    return updated


@router.put("/employer", response_model=EmployerWithUser)
async def update_employer_profile(
    data: EmployerProfileUpdate,
    employer: EmployerWithUser = Depends(get_current_employer),
    storage: Storage = Depends(get_storage),
):
    user_updates = data.user_updates()
    profile_updates = data.profile_updates()
    updated = await storage.update_employer_profile(
        employer.employer.id, user_updates, profile_updates
    )

    logger.info(
        "profile_updated",
        user_id=str(employer.user.id),
        fields=sorted({**user_updates, **profile_updates}),
    )
    return updated
