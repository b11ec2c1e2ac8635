"""Pydantic schemas for requests, stored records and composed responses."""

from jobconnect.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    ApplicationWithJob,
    ApplicationWithJobSeeker,
)
from jobconnect.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    EmployerRegistration,
    JobSeekerRegistration,
    LoginRequest,
)
from jobconnect.schemas.common import SuccessResponse
from jobconnect.schemas.dashboard import (
    EmployerDashboard,
    EmployerStats,
    JobSeekerDashboard,
    JobSeekerStats,
)
from jobconnect.schemas.interview import (
    InterviewRead,
    InterviewSchedule,
    InterviewUpdate,
    InterviewWithDetails,
)
from jobconnect.schemas.job import JobPosting, JobRead, JobUpdate, JobWithEmployer
from jobconnect.schemas.message import MessageCreate, MessageRead, MessageWithUsers
from jobconnect.schemas.review import CompanyReviewCreate, ReviewRead, ReviewWithDetails
from jobconnect.schemas.saved_job import (
    JobMatchRead,
    JobMatchWithJob,
    SavedJobCreate,
    SavedJobRead,
    SavedJobWithJob,
)
from jobconnect.schemas.skill import (
    SkillCreate,
    SkillRead,
    UserSkillCreate,
    UserSkillRead,
    UserSkillWithSkill,
)
from jobconnect.schemas.user import (
    EmployerProfileUpdate,
    EmployerRead,
    EmployerWithUser,
    JobSeekerProfileUpdate,
    JobSeekerRead,
    JobSeekerWithUser,
    UserRead,
)

__all__ = [
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    "ApplicationWithJob",
    "ApplicationWithJobSeeker",
    "AuthResponse",
    "CompanyReviewCreate",
    "CurrentUserResponse",
    "EmployerDashboard",
    "EmployerProfileUpdate",
    "EmployerRead",
    "EmployerRegistration",
    "EmployerStats",
    "EmployerWithUser",
    "InterviewRead",
    "InterviewSchedule",
    "InterviewUpdate",
    "InterviewWithDetails",
    "JobMatchRead",
    "JobMatchWithJob",
    "JobPosting",
    "JobRead",
    "JobSeekerDashboard",
    "JobSeekerProfileUpdate",
    "JobSeekerRead",
    "JobSeekerRegistration",
    "JobSeekerStats",
    "JobSeekerWithUser",
    "JobUpdate",
    "JobWithEmployer",
    "LoginRequest",
    "MessageCreate",
    "MessageRead",
    "MessageWithUsers",
    "ReviewRead",
    "ReviewWithDetails",
    "SavedJobCreate",
    "SavedJobRead",
    "SavedJobWithJob",
    "SkillCreate",
    "SkillRead",
    "SuccessResponse",
    "UserRead",
    "UserSkillCreate",
    "UserSkillRead",
    "UserSkillWithSkill",
]
