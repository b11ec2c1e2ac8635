"""Company review endpoints."""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_job_seeker, get_storage
from jobconnect.core.exceptions import NotFoundError
from jobconnect.schemas import CompanyReviewCreate, JobSeekerWithUser, ReviewRead, ReviewWithDetails
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/{employer_id}", response_model=List[ReviewWithDetails])
async def company_reviews(employer_id: UUID, storage: Storage = Depends(get_storage)):
    """Public reviews of an employer, newest first."""
    return await storage.get_company_reviews(employer_id)


@router.post("", response_model=ReviewRead)
async def create_review(
    data: CompanyReviewCreate,
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    if await storage.get_employer_by_id(data.employer_id) is None:
        raise NotFoundError("Employer not found")

    review = await storage.create_review(job_seeker.job_seeker.id, data.model_dump())
    logger.info("review_created", review_id=str(review.id), employer_id=str(data.employer_id))
    return review
