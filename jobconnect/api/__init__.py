"""API routes."""

from fastapi import APIRouter

from jobconnect.api import (
    applications,
    auth,
    dashboard,
    interviews,
    jobs,
    messages,
    profile,
    reviews,
    saved_jobs,
    skills,
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(applications.router, prefix="/applications", tags=["Applications"])
api_router.include_router(interviews.router, prefix="/interviews", tags=["Interviews"])
api_router.include_router(saved_jobs.router, prefix="/saved-jobs", tags=["Saved Jobs"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["Reviews"])
api_router.include_router(messages.router, prefix="/messages", tags=["Messages"])
api_router.include_router(skills.router, prefix="/skills", tags=["Skills"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
