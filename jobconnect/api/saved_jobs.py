"""Saved job (bookmark) endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_job_seeker, get_storage
from jobconnect.core.exceptions import NotFoundError
from jobconnect.schemas import JobSeekerWithUser, SavedJobCreate, SavedJobWithJob, SuccessResponse
from jobconnect.storage import Storage

router = APIRouter()


@router.get("", response_model=List[SavedJobWithJob])
async def list_saved_jobs(
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_saved_jobs(job_seeker.job_seeker.id)


@router.post("", response_model=SuccessResponse)
async def save_job(
    data: SavedJobCreate,
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    """Bookmark a job. Saving the same job twice is a no-op."""
    if await storage.get_job(data.job_id) is None:
        raise NotFoundError("Job not found")
    await storage.save_job(job_seeker.job_seeker.id, data.job_id, data.notes)
    return SuccessResponse()


@router.delete("/{job_id}", response_model=SuccessResponse)
async def unsave_job(
    job_id: UUID,
    job_seeker: JobSeekerWithUser = Depends(get_current_job_seeker),
    storage: Storage = Depends(get_storage),
):
    await storage.unsave_job(job_seeker.job_seeker.id, job_id)
    return SuccessResponse()
