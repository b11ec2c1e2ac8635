"""User and profile schemas."""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from jobconnect.core.security import Role
from jobconnect.schemas.common import (
    JsonList,
    RecordModel,
    RequestModel,
    StrList,
    check_salary_range,
)
from jobconnect.schemas.enums import RemotePolicy, SalaryType, WorkLocation
from jobconnect.utils.validators import validate_phone, validate_url


class UserRead(RecordModel):
    """User account. The password hash is never serialized."""

    id: UUID
    username: str
    email: str
    password_hash: str = Field(default="", exclude=True, repr=False)
    role: Role
    first_name: str
    last_name: str
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    bio: Optional[str] = None
    is_verified: bool = False
    is_active: bool = True
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class JobSeekerRead(RecordModel):
    """Job seeker profile."""

    id: UUID
    user_id: UUID
    professional_title: Optional[str] = None
    years_experience: Optional[str] = None
    skills: StrList = Field(default_factory=list)
    location: Optional[str] = None
    resume_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    website_url: Optional[str] = None
    expected_salary_min: Optional[int] = None
    expected_salary_max: Optional[int] = None
    salary_type: Optional[str] = "monthly"
    work_preference: Optional[str] = None
    availability: Optional[str] = None
    notice_period: Optional[str] = None
    education: JsonList = Field(default_factory=list)
    experience: JsonList = Field(default_factory=list)
    certifications: JsonList = Field(default_factory=list)
    languages: StrList = Field(default_factory=list)
    open_to_relocate: bool = False
    job_alerts: bool = True
    profile_visibility: Optional[str] = "public"
    created_at: datetime
    updated_at: Optional[datetime] = None


class EmployerRead(RecordModel):
    """Employer (company) profile."""

    id: UUID
    user_id: UUID
    job_title: Optional[str] = None
    company_name: str
    company_size: Optional[str] = None
    industry: Optional[str] = None
    company_location: Optional[str] = None
    company_description: Optional[str] = None
    company_logo: Optional[str] = None
    website: Optional[str] = None
    linkedin_url: Optional[str] = None
    founded_year: Optional[int] = None
    employee_count: Optional[int] = None
    headquarters: Optional[str] = None
    benefits: StrList = Field(default_factory=list)
    company_values: StrList = Field(default_factory=list)
    work_culture: Optional[str] = None
    remote_policy: Optional[str] = None
    is_verified: bool = False
    is_hiring: bool = True
    created_at: datetime
    updated_at: Optional[datetime] = None


class JobSeekerWithUser(BaseModel):
    """Job seeker profile together with its owning user."""

    job_seeker: JobSeekerRead
    user: UserRead

    @property
    def id(self) -> UUID:
        return self.job_seeker.id


class EmployerWithUser(BaseModel):
    """Employer profile together with its owning user."""

    employer: EmployerRead
    user: UserRead

    @property
    def id(self) -> UUID:
        return self.employer.id


# ==================== Profile updates ====================

class UserFieldsUpdate(RequestModel):
    """User fields either role may change.

    Role, email and username are fixed. Fields sent as null are left unchanged.
    """

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    bio: Optional[str] = None
    profile_image: Optional[str] = Field(None, max_length=500)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not validate_phone(v):
            raise ValueError("Invalid phone number")
        return v

    def user_updates(self) -> dict:
        return self.model_dump(
            include=set(UserFieldsUpdate.model_fields), exclude_unset=True, exclude_none=True
        )

    def profile_updates(self) -> dict:
        return self.model_dump(
            exclude=set(UserFieldsUpdate.model_fields), exclude_unset=True, exclude_none=True
        )


class JobSeekerProfileUpdate(UserFieldsUpdate):
    """Partial update of a job seeker's user and profile fields."""

    professional_title: Optional[str] = Field(None, min_length=1, max_length=200)
    years_experience: Optional[str] = Field(None, max_length=20)
    skills: Optional[List[str]] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    resume_url: Optional[str] = Field(None, max_length=500)
    portfolio_url: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    github_url: Optional[str] = Field(None, max_length=500)
    website_url: Optional[str] = Field(None, max_length=500)
    expected_salary_min: Optional[int] = Field(None, ge=0)
    expected_salary_max: Optional[int] = Field(None, ge=0)
    salary_type: Optional[SalaryType] = None
    work_preference: Optional[WorkLocation] = None
    availability: Optional[str] = Field(None, max_length=100)
    notice_period: Optional[str] = Field(None, max_length=50)
    education: Optional[List[Any]] = None
    experience: Optional[List[Any]] = None
    certifications: Optional[List[Any]] = None
    languages: Optional[List[str]] = None
    open_to_relocate: Optional[bool] = None
    job_alerts: Optional[bool] = None
    profile_visibility: Optional[str] = Field(None, max_length=20)

    @field_validator("resume_url", "portfolio_url", "linkedin_url", "github_url", "website_url")
    @classmethod
    def check_urls(cls, v: Optional[str]) -> Optional[str]:
        if v and not validate_url(v):
            raise ValueError("Invalid URL")
        return v

    @field_validator("expected_salary_max")
    @classmethod
    def check_expected_salary_max(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_salary_range(v, info, min_field="expected_salary_min")


class EmployerProfileUpdate(UserFieldsUpdate):
    """Partial update of an employer's user and company fields."""

    job_title: Optional[str] = Field(None, max_length=200)
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    company_size: Optional[str] = Field(None, min_length=1, max_length=20)
    industry: Optional[str] = Field(None, min_length=1, max_length=100)
    company_location: Optional[str] = Field(None, min_length=1, max_length=200)
    company_description: Optional[str] = None
    company_logo: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    employee_count: Optional[int] = Field(None, ge=0)
    headquarters: Optional[str] = Field(None, max_length=200)
    benefits: Optional[List[str]] = None
    company_values: Optional[List[str]] = None
    work_culture: Optional[str] = None
    remote_policy: Optional[RemotePolicy] = None
    is_hiring: Optional[bool] = None

    @field_validator("website", "linkedin_url")
    @classmethod
    def check_urls(cls, v: Optional[str]) -> Optional[str]:
        if v and not validate_url(v):
            raise ValueError("Invalid URL")
        return v
