"""Job posting schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from jobconnect.schemas.common import (
    RecordModel,
    RequestModel,
    StrList,
    check_salary_range,
    to_naive_utc,
)
from jobconnect.schemas.enums import (
    EmploymentType,
    ExperienceLevel,
    JobStatus,
    SalaryType,
    WorkLocation,
)
from jobconnect.schemas.user import EmployerWithUser


class JobPosting(RequestModel):
    """New job posting."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=10)
    department: Optional[str] = Field(None, max_length=100)
    employment_type: EmploymentType
    experience_level: Optional[ExperienceLevel] = None
    work_location: WorkLocation = WorkLocation.ONSITE
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_type: SalaryType = SalaryType.MONTHLY
    currency: str = Field("USD", min_length=3, max_length=3)
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    location: str = Field(..., min_length=1, max_length=200)
    application_deadline: Optional[datetime] = None
    start_date: Optional[datetime] = None
    is_urgent: bool = False

    @field_validator("salary_max")
    @classmethod
    def check_salary_max(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_salary_range(v, info)

    @field_validator("application_deadline", "start_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class JobUpdate(RequestModel):
    """Partial job update. Only the fields sent are applied."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=10)
    department: Optional[str] = Field(None, max_length=100)
    employment_type: Optional[EmploymentType] = None
    experience_level: Optional[ExperienceLevel] = None
    work_location: Optional[WorkLocation] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_type: Optional[SalaryType] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    required_skills: Optional[List[str]] = None
    preferred_skills: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    application_deadline: Optional[datetime] = None
    start_date: Optional[datetime] = None
    is_urgent: Optional[bool] = None
    status: Optional[JobStatus] = None

    @field_validator("salary_max")
    @classmethod
    def check_salary_max(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_salary_range(v, info)

    @field_validator("application_deadline", "start_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class JobRead(RecordModel):
    """Stored job posting."""

    id: UUID
    employer_id: UUID
    title: str
    description: str
    department: Optional[str] = None
    employment_type: EmploymentType
    experience_level: Optional[ExperienceLevel] = None
    work_location: Optional[WorkLocation] = WorkLocation.ONSITE
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_type: Optional[SalaryType] = SalaryType.MONTHLY
    currency: Optional[str] = "USD"
    required_skills: StrList = Field(default_factory=list)
    preferred_skills: StrList = Field(default_factory=list)
    responsibilities: StrList = Field(default_factory=list)
    requirements: StrList = Field(default_factory=list)
    benefits: StrList = Field(default_factory=list)
    location: Optional[str] = None
    application_deadline: Optional[datetime] = None
    start_date: Optional[datetime] = None
    is_urgent: bool = False
    is_featured: bool = False
    views: int = 0
    applications_count: int = 0
    status: JobStatus = JobStatus.ACTIVE
    created_at: datetime
    updated_at: Optional[datetime] = None

    def posting_fields(self) -> dict:
        """Fields a poster controls, in ``JobPosting`` shape."""
        return self.model_dump(include=set(JobPosting.model_fields), mode="json")


class JobWithEmployer(BaseModel):
    """Job together with the employer that posted it."""

    job: JobRead
    employer: EmployerWithUser
