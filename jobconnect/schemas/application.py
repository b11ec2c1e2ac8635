"""Job application schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from jobconnect.schemas.common import RecordModel, RequestModel
from jobconnect.schemas.enums import ApplicationStatus
from jobconnect.schemas.job import JobRead, JobWithEmployer
from jobconnect.schemas.user import JobSeekerWithUser


class ApplicationCreate(RequestModel):
    """Application submitted by a job seeker."""

    job_id: UUID
    cover_letter: Optional[str] = Field(None, max_length=10000)
    custom_resume: Optional[str] = Field(None, max_length=500)
    expected_salary: Optional[int] = Field(None, ge=0)
    availability: Optional[str] = Field(None, max_length=100)


class ApplicationStatusUpdate(RequestModel):
    """Employer decision on an application."""

    status: ApplicationStatus
    notes: Optional[str] = None


class ApplicationRead(RecordModel):
    """Stored application."""

    id: UUID
    job_id: UUID
    job_seeker_id: UUID
    status: ApplicationStatus = ApplicationStatus.PENDING
    cover_letter: Optional[str] = None
    custom_resume: Optional[str] = None
    expected_salary: Optional[int] = None
    availability: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ApplicationWithJob(BaseModel):
    """A job seeker's application with the job and its employer."""

    application: ApplicationRead
    job: JobWithEmployer
    job_seeker: JobSeekerWithUser


class ApplicationWithJobSeeker(BaseModel):
    """An application as seen by the employer: job plus applicant."""

    application: ApplicationRead
    job: JobRead
    job_seeker: JobSeekerWithUser
