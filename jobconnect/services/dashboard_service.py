"""Per-role dashboard aggregation."""

from datetime import datetime
from typing import List
from uuid import UUID

from jobconnect.config import Settings
from jobconnect.core.exceptions import ProfileNotFoundError
from jobconnect.schemas import (
    EmployerDashboard,
    EmployerStats,
    InterviewWithDetails,
    JobSeekerDashboard,
    JobSeekerStats,
)
from jobconnect.schemas.enums import ApplicationStatus, InterviewStatus, JobStatus
from jobconnect.storage import Storage

UPCOMING_STATUSES = {InterviewStatus.SCHEDULED, InterviewStatus.RESCHEDULED}


def upcoming_interviews(
    interviews: List[InterviewWithDetails], limit: int
) -> List[InterviewWithDetails]:
    """Scheduled or rescheduled interviews that have not started, soonest first."""
    now = datetime.utcnow()
    upcoming = [
        item
        for item in interviews
        if item.interview.status in UPCOMING_STATUSES and item.interview.scheduled_at >= now
    ]
    upcoming.sort(key=lambda item: item.interview.scheduled_at)
    return upcoming[:limit]


class DashboardService:
    """Builds the job seeker and employer dashboards from storage reads."""

    def __init__(self, storage: Storage, settings: Settings):
        self.storage = storage
        self.settings = settings

    async def job_seeker_dashboard(self, user_id: UUID) -> JobSeekerDashboard:
        profile = await self.storage.get_job_seeker(user_id)
        if profile is None:
            raise ProfileNotFoundError("Job seeker profile not found")

        recent = self.settings.DASHBOARD_RECENT_ITEMS_LIMIT
        job_seeker_id = profile.job_seeker.id

        applications = await self.storage.get_applications_by_job_seeker(job_seeker_id)
        saved_jobs = await self.storage.get_saved_jobs(job_seeker_id)
        interviews = await self.storage.get_interviews_by_job_seeker(job_seeker_id)
        job_matches = await self.storage.get_job_matches(job_seeker_id, limit=recent)
        conversations = await self.storage.get_conversations(user_id, limit=recent)

        stats = JobSeekerStats(
            total_applications=len(applications),
            pending_applications=sum(
                1 for a in applications if a.application.status == ApplicationStatus.PENDING
            ),
            interviews_scheduled=sum(
                1 for i in interviews if i.interview.status == InterviewStatus.SCHEDULED
            ),
            saved_jobs_count=len(saved_jobs),
        )

        return JobSeekerDashboard(
            profile=profile,
            stats=stats,
            recent_applications=applications[:recent],
            saved_jobs=saved_jobs[:recent],
            job_matches=job_matches,
            upcoming_interviews=upcoming_interviews(interviews, recent),
            recent_conversations=conversations,
        )

    async def employer_dashboard(self, user_id: UUID) -> EmployerDashboard:
        profile = await self.storage.get_employer(user_id)
        if profile is None:
            raise ProfileNotFoundError("Employer profile not found")

        recent = self.settings.DASHBOARD_RECENT_ITEMS_LIMIT
        employer_id = profile.employer.id

        jobs = await self.storage.get_jobs_by_employer(employer_id)
        applications = await self.storage.get_applications_by_employer(employer_id)
        interviews = await self.storage.get_interviews_by_employer(employer_id)
        reviews = await self.storage.get_company_reviews(employer_id)
        conversations = await self.storage.get_conversations(user_id, limit=recent)

        active_jobs = [job for job in jobs if job.status == JobStatus.ACTIVE]
        average_rating = 0.0
        if reviews:
            average_rating = round(sum(r.review.rating for r in reviews) / len(reviews), 2)

        stats = EmployerStats(
            total_jobs=len(jobs),
            active_jobs=len(active_jobs),
            total_applications=len(applications),
            interviews_scheduled=sum(
                1 for i in interviews if i.interview.status == InterviewStatus.SCHEDULED
            ),
            average_rating=average_rating,
        )

        return EmployerDashboard(
            profile=profile,
            stats=stats,
            active_jobs=active_jobs[: self.settings.DASHBOARD_ACTIVE_JOBS_LIMIT],
            recent_applications=applications[: self.settings.DASHBOARD_RECENT_APPLICATIONS_LIMIT],
            upcoming_interviews=upcoming_interviews(interviews, recent),
            company_reviews=reviews[:recent],
            recent_conversations=conversations,
        )
