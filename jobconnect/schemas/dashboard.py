"""Dashboard payloads."""

from typing import List

from pydantic import BaseModel

from jobconnect.schemas.application import ApplicationWithJob, ApplicationWithJobSeeker
from jobconnect.schemas.interview import InterviewWithDetails
from jobconnect.schemas.job import JobRead
from jobconnect.schemas.message import MessageWithUsers
from jobconnect.schemas.review import ReviewWithDetails
from jobconnect.schemas.saved_job import JobMatchWithJob, SavedJobWithJob
from jobconnect.schemas.user import EmployerWithUser, JobSeekerWithUser


class JobSeekerStats(BaseModel):
    total_applications: int = 0
    pending_applications: int = 0
    interviews_scheduled: int = 0
    saved_jobs_count: int = 0


class JobSeekerDashboard(BaseModel):
    profile: JobSeekerWithUser
    stats: JobSeekerStats
    recent_applications: List[ApplicationWithJob]
    saved_jobs: List[SavedJobWithJob]
    job_matches: List[JobMatchWithJob]
    upcoming_interviews: List[InterviewWithDetails]
    recent_conversations: List[MessageWithUsers]


class EmployerStats(BaseModel):
    total_jobs: int = 0
    active_jobs: int = 0
    total_applications: int = 0
    interviews_scheduled: int = 0
    average_rating: float = 0


class EmployerDashboard(BaseModel):
    profile: EmployerWithUser
    stats: EmployerStats
    active_jobs: List[JobRead]
    recent_applications: List[ApplicationWithJobSeeker]
    upcoming_interviews: List[InterviewWithDetails]
    company_reviews: List[ReviewWithDetails]
    recent_conversations: List[MessageWithUsers]
