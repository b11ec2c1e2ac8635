"""Company review schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from jobconnect.schemas.common import RecordModel, RequestModel
from jobconnect.schemas.user import EmployerRead, JobSeekerWithUser


class CompanyReviewCreate(RequestModel):
    """Review of an employer written by a job seeker."""

    employer_id: UUID
    rating: int = Field(..., ge=1, le=5)
    title: str = Field(..., min_length=1, max_length=200)
    pros: Optional[str] = None
    cons: Optional[str] = None
    advice: Optional[str] = None
    work_life_balance: Optional[int] = Field(None, ge=1, le=5)
    compensation: Optional[int] = Field(None, ge=1, le=5)
    culture: Optional[int] = Field(None, ge=1, le=5)
    management: Optional[int] = Field(None, ge=1, le=5)
    is_current_employee: bool = False
    job_title: Optional[str] = Field(None, max_length=200)
    department: Optional[str] = Field(None, max_length=100)
    is_anonymous: bool = True


class ReviewRead(RecordModel):
    """Stored review."""

    id: UUID
    employer_id: UUID
    job_seeker_id: Optional[UUID] = None
    rating: int
    title: str
    pros: Optional[str] = None
    cons: Optional[str] = None
    advice: Optional[str] = None
    work_life_balance: Optional[int] = None
    compensation: Optional[int] = None
    culture: Optional[int] = None
    management: Optional[int] = None
    is_current_employee: bool = False
    job_title: Optional[str] = None
    department: Optional[str] = None
    is_anonymous: bool = True
    is_verified: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class ReviewWithDetails(BaseModel):
    """Review with the employer and, unless anonymous, the reviewer."""

    review: ReviewRead
    employer: EmployerRead
    job_seeker: Optional[JobSeekerWithUser] = None
