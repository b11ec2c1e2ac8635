"""Saved job and job match schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from jobconnect.schemas.common import JsonList, RecordModel, RequestModel
from jobconnect.schemas.job import JobWithEmployer


class SavedJobCreate(RequestModel):
    """Bookmark a job."""

    job_id: UUID
    notes: Optional[str] = None


class SavedJobRead(RecordModel):
    id: UUID
    job_seeker_id: UUID
    job_id: UUID
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class SavedJobWithJob(BaseModel):
    saved_job: SavedJobRead
    job: JobWithEmployer


class JobMatchRead(RecordModel):
    id: UUID
    job_seeker_id: UUID
    job_id: UUID
    match_score: Optional[float] = None
    match_reasons: JsonList = Field(default_factory=list)
    is_viewed: bool = False
    is_dismissed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class JobMatchWithJob(BaseModel):
    match: JobMatchRead
    job: JobWithEmployer
