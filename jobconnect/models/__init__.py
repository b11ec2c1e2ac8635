"""Database models."""

# Import all models in dependency order to ensure proper relationship initialization

# Base models (no foreign keys)
from jobconnect.models.user import User
from jobconnect.models.skill import Skill

# Profiles
from jobconnect.models.job_seeker import JobSeeker
from jobconnect.models.employer import Employer

# Models with foreign keys to profiles
from jobconnect.models.job import Job
from jobconnect.models.application import Application
from jobconnect.models.interview import Interview
from jobconnect.models.review import CompanyReview
from jobconnect.models.saved_job import SavedJob, JobMatch
from jobconnect.models.message import Message
from jobconnect.models.skill import UserSkill

# Export all models
__all__ = [
    "User",
    "JobSeeker",
    "Employer",
    "Job",
    "Application",
    "Interview",
    "CompanyReview",
    "SavedJob",
    "JobMatch",
    "Message",
    "Skill",
    "UserSkill",
]
