"""Interview schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from jobconnect.schemas.application import ApplicationRead
from jobconnect.schemas.common import RecordModel, RequestModel, to_naive_utc
from jobconnect.schemas.enums import InterviewStatus, InterviewType
from jobconnect.schemas.job import JobRead
from jobconnect.schemas.user import EmployerWithUser, JobSeekerWithUser


class InterviewSchedule(RequestModel):
    """Interview scheduled by an employer for one of its applications."""

    application_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    scheduled_at: datetime
    duration: int = Field(60, ge=15, le=480)
    type: InterviewType
    location: str = Field(..., min_length=1, max_length=500)

    @field_validator("scheduled_at")
    @classmethod
    def normalize_scheduled_at(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class InterviewUpdate(RequestModel):
    """Status change plus optional outcome details."""

    status: InterviewStatus
    feedback: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    interviewer_notes: Optional[str] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("scheduled_at")
    @classmethod
    def normalize_scheduled_at(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class InterviewRead(RecordModel):
    """Stored interview."""

    id: UUID
    application_id: UUID
    employer_id: UUID
    job_seeker_id: UUID
    title: str
    description: Optional[str] = None
    scheduled_at: datetime
    duration: int = 60
    type: InterviewType
    location: Optional[str] = None
    status: InterviewStatus = InterviewStatus.SCHEDULED
    interviewer_notes: Optional[str] = None
    candidate_notes: Optional[str] = None
    rating: Optional[int] = None
    feedback: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class InterviewWithDetails(BaseModel):
    """Interview with its application, job and both parties."""

    interview: InterviewRead
    application: ApplicationRead
    job: JobRead
    employer: EmployerWithUser
    job_seeker: JobSeekerWithUser
