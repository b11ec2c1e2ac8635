"""Authentication schemas: registration, login and the current-user payload."""

from typing import List, Optional, Union

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from jobconnect.core.security import Role
from jobconnect.schemas.common import RequestModel, check_salary_range
from jobconnect.schemas.enums import RemotePolicy, SalaryType, WorkLocation
from jobconnect.schemas.user import EmployerRead, JobSeekerRead, UserRead
from jobconnect.utils.validators import validate_phone, validate_url


class RegistrationBase(RequestModel):
    """Account fields shared by both registration flows."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    confirm_password: str
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    bio: Optional[str] = None

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        # password is absent from info.data when it failed its own checks
        password = info.data.get("password")
        if password is not None and v != password:
            raise PydanticCustomError("password_mismatch", "Passwords don't match")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not validate_phone(v):
            raise ValueError("Invalid phone number")
        return v

    def user_fields(self) -> dict:
        """Fields that belong on the User row (password excluded)."""
        return self.model_dump(
            include={"username", "email", "first_name", "last_name", "phone", "bio"}
        )


class JobSeekerRegistration(RegistrationBase):
    """Job seeker sign-up form."""

    professional_title: str = Field(..., min_length=1, max_length=200)
    skills: List[str] = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=200)
    years_experience: Optional[str] = Field(None, max_length=20)
    expected_salary_min: Optional[int] = Field(None, ge=0)
    expected_salary_max: Optional[int] = Field(None, ge=0)
    salary_type: SalaryType = SalaryType.MONTHLY
    work_preference: Optional[WorkLocation] = None
    availability: Optional[str] = Field(None, max_length=100)
    open_to_relocate: bool = False

    @field_validator("expected_salary_max")
    @classmethod
    def check_expected_salary_max(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_salary_range(v, info, min_field="expected_salary_min")

    def profile_fields(self) -> dict:
        return self.model_dump(
            include={
                "professional_title",
                "skills",
                "location",
                "years_experience",
                "expected_salary_min",
                "expected_salary_max",
                "salary_type",
                "work_preference",
                "availability",
                "open_to_relocate",
            }
        )


class EmployerRegistration(RegistrationBase):
    """Employer sign-up form."""

    company_name: str = Field(..., min_length=1, max_length=200)
    company_size: str = Field(..., min_length=1, max_length=20)
    industry: str = Field(..., min_length=1, max_length=100)
    company_location: str = Field(..., min_length=1, max_length=200)
    job_title: Optional[str] = Field(None, max_length=200)
    company_description: Optional[str] = None
    website: Optional[str] = Field(None, max_length=500)
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    remote_policy: Optional[RemotePolicy] = None

    @field_validator("website")
    @classmethod
    def check_website(cls, v: Optional[str]) -> Optional[str]:
        # An empty string means "no website"
        if v and not validate_url(v):
            raise ValueError("Invalid URL")
        return v or None

    def profile_fields(self) -> dict:
        return self.model_dump(
            include={
                "company_name",
                "company_size",
                "industry",
                "company_location",
                "job_title",
                "company_description",
                "website",
                "founded_year",
                "remote_policy",
            }
        )


class LoginRequest(RequestModel):
    """Login form."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Result of a successful registration or login."""

    success: bool = True
    role: Role


class CurrentUserResponse(BaseModel):
    """The authenticated user and their role profile."""

    user: UserRead
    # Employer first: a job seeker payload lacks company_name and falls through
    profile: Optional[Union[EmployerRead, JobSeekerRead]] = None
