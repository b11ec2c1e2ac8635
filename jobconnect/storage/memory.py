"""In-memory storage backend for development and tests."""

import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple, Type, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel

from jobconnect.core.exceptions import ConflictError
from jobconnect.core.security import Role
from jobconnect.schemas import (
    ApplicationRead,
    ApplicationWithJob,
    ApplicationWithJobSeeker,
    EmployerRead,
    EmployerWithUser,
    InterviewRead,
    InterviewWithDetails,
    JobMatchRead,
    JobMatchWithJob,
    JobRead,
    JobSeekerRead,
    JobSeekerWithUser,
    JobWithEmployer,
    MessageRead,
    MessageWithUsers,
    ReviewRead,
    ReviewWithDetails,
    SavedJobRead,
    SavedJobWithJob,
    SkillRead,
    UserRead,
    UserSkillRead,
    UserSkillWithSkill,
)
from jobconnect.schemas.enums import JobStatus
from jobconnect.storage.base import Storage, Values


RecordT = TypeVar("RecordT", bound=BaseModel)


def _new(model: Type[RecordT], values: Values) -> RecordT:
    now = datetime.utcnow()
    return model.model_validate({**values, "id": uuid.uuid4(), "created_at": now, "updated_at": now})


def _replace(record: RecordT, updates: Values) -> RecordT:
    # dict(record) keeps fields excluded from serialization (password_hash)
    return type(record).model_validate(
        {**dict(record), **updates, "updated_at": datetime.utcnow()}
    )


def _newest_first(records: Iterable[RecordT]) -> List[RecordT]:
    # Reverse insertion order first so equal timestamps still list newest first
    return sorted(reversed(list(records)), key=lambda r: r.created_at, reverse=True)


def _limit(items: List, limit: Optional[int]) -> List:
    return items if limit is None else items[:limit]


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


class MemoryStorage(Storage):
    """Dict-backed storage mirroring the database constraints and cascades."""

    def __init__(self):
        self.users: Dict[UUID, UserRead] = {}
        self.job_seekers: Dict[UUID, JobSeekerRead] = {}
        self.employers: Dict[UUID, EmployerRead] = {}
        self.jobs: Dict[UUID, JobRead] = {}
        self.applications: Dict[UUID, ApplicationRead] = {}
        self.interviews: Dict[UUID, InterviewRead] = {}
        self.reviews: Dict[UUID, ReviewRead] = {}
        self.saved_jobs: Dict[UUID, SavedJobRead] = {}
        self.job_matches: Dict[UUID, JobMatchRead] = {}
        self.messages: Dict[UUID, MessageRead] = {}
        self.skills: Dict[UUID, SkillRead] = {}
        self.user_skills: Dict[UUID, UserSkillRead] = {}

    # ==================== Composition helpers ====================

    def _job_seeker_with_user(self, job_seeker: JobSeekerRead) -> JobSeekerWithUser:
        return JobSeekerWithUser(job_seeker=job_seeker, user=self.users[job_seeker.user_id])

    def _employer_with_user(self, employer: EmployerRead) -> EmployerWithUser:
        return EmployerWithUser(employer=employer, user=self.users[employer.user_id])

    def _job_with_employer(self, job: JobRead) -> JobWithEmployer:
        return JobWithEmployer(
            job=job, employer=self._employer_with_user(self.employers[job.employer_id])
        )

    def _interview_details(self, interview: InterviewRead) -> InterviewWithDetails:
        application = self.applications[interview.application_id]
        return InterviewWithDetails(
            interview=interview,
            application=application,
            job=self.jobs[application.job_id],
            employer=self._employer_with_user(self.employers[interview.employer_id]),
            job_seeker=self._job_seeker_with_user(self.job_seekers[interview.job_seeker_id]),
        )

    def _message_with_users(self, message: MessageRead) -> MessageWithUsers:
        return MessageWithUsers(
            message=message,
            sender=self.users[message.sender_id],
            receiver=self.users[message.receiver_id],
        )

    # ==================== Users ====================

    async def get_user(self, user_id: UUID) -> Optional[UserRead]:
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def create_user_with_profile(
        self, user: Values, profile: Values
    ) -> Tuple[UserRead, Union[JobSeekerRead, EmployerRead]]:
        if await self.get_user_by_email(user["email"]):
            raise ConflictError("User already exists")
        if await self.get_user_by_username(user["username"]):
            raise ConflictError("Username already taken")

        user_record = _new(UserRead, user)
        profile_values = {**profile, "user_id": user_record.id}
        if user_record.role == Role.JOB_SEEKER:
            profile_record = _new(JobSeekerRead, profile_values)
            self.job_seekers[profile_record.id] = profile_record
        else:
            profile_record = _new(EmployerRead, profile_values)
            self.employers[profile_record.id] = profile_record
        self.users[user_record.id] = user_record
        return user_record, profile_record

    async def update_user(self, user_id: UUID, updates: Values) -> Optional[UserRead]:
        user = self.users.get(user_id)
        if user is None:
            return None
        self.users[user_id] = _replace(user, updates)
        return self.users[user_id]

    # ==================== Profiles ====================

    async def get_job_seeker(self, user_id: UUID) -> Optional[JobSeekerWithUser]:
        for job_seeker in self.job_seekers.values():
            if job_seeker.user_id == user_id:
                return self._job_seeker_with_user(job_seeker)
        return None

    async def get_job_seeker_by_id(self, job_seeker_id: UUID) -> Optional[JobSeekerWithUser]:
        job_seeker = self.job_seekers.get(job_seeker_id)
        return self._job_seeker_with_user(job_seeker) if job_seeker else None

    def _replace_user(self, user_id: UUID, updates: Values) -> UserRead:
        user = self.users[user_id]
        return _replace(user, updates) if updates else user

    async def update_job_seeker_profile(
        self, job_seeker_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[JobSeekerWithUser]:
        job_seeker = self.job_seekers.get(job_seeker_id)
        if job_seeker is None:
            return None
        # Build both records before storing either
        user = self._replace_user(job_seeker.user_id, user_updates)
        if profile_updates:
            job_seeker = _replace(job_seeker, profile_updates)
        self.users[user.id] = user
        self.job_seekers[job_seeker_id] = job_seeker
        return JobSeekerWithUser(job_seeker=job_seeker, user=user)

    async def get_employer(self, user_id: UUID) -> Optional[EmployerWithUser]:
        for employer in self.employers.values():
            if employer.user_id == user_id:
                return self._employer_with_user(employer)
        return None

    async def get_employer_by_id(self, employer_id: UUID) -> Optional[EmployerWithUser]:
        employer = self.employers.get(employer_id)
        return self._employer_with_user(employer) if employer else None

    async def update_employer_profile(
        self, employer_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[EmployerWithUser]:
        employer = self.employers.get(employer_id)
        if employer is None:
            return None
        user = self._replace_user(employer.user_id, user_updates)
        if profile_updates:
            employer = _replace(employer, profile_updates)
        self.users[user.id] = user
        self.employers[employer_id] = employer
        return EmployerWithUser(employer=employer, user=user)

    # ==================== Jobs ====================

    async def list_jobs(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        employment_type: Optional[str] = None,
    ) -> List[JobWithEmployer]:
        jobs = [job for job in self.jobs.values() if job.status == JobStatus.ACTIVE]
        if search:
            jobs = [j for j in jobs if _contains(j.title, search) or _contains(j.description, search)]
        if location:
            jobs = [j for j in jobs if _contains(j.location, location)]
        if employment_type:
            jobs = [j for j in jobs if j.employment_type == employment_type]
        return [self._job_with_employer(job) for job in _newest_first(jobs)]

    async def get_job(self, job_id: UUID) -> Optional[JobWithEmployer]:
        job = self.jobs.get(job_id)
        return self._job_with_employer(job) if job else None

    async def get_jobs_by_employer(self, employer_id: UUID) -> List[JobRead]:
        return _newest_first(j for j in self.jobs.values() if j.employer_id == employer_id)

    async def create_job(self, employer_id: UUID, values: Values) -> JobRead:
        job = _new(JobRead, {**values, "employer_id": employer_id})
        self.jobs[job.id] = job
        return job

    async def update_job(self, job_id: UUID, updates: Values) -> Optional[JobRead]:
        job = self.jobs.get(job_id)
        if job is None:
            return None
        self.jobs[job_id] = _replace(job, updates)
        return self.jobs[job_id]

    async def delete_job(self, job_id: UUID) -> bool:
        if self.jobs.pop(job_id, None) is None:
            return False
        application_ids = {a.id for a in self.applications.values() if a.job_id == job_id}
        for application_id in application_ids:
            del self.applications[application_id]
        self.interviews = {
            k: i for k, i in self.interviews.items() if i.application_id not in application_ids
        }
        self.saved_jobs = {k: s for k, s in self.saved_jobs.items() if s.job_id != job_id}
        self.job_matches = {k: m for k, m in self.job_matches.items() if m.job_id != job_id}
        for message_id, message in list(self.messages.items()):
            if message.application_id in application_ids:
                self.messages[message_id] = _replace(message, {"application_id": None})
        return True

    # ==================== Applications ====================

    async def create_application(self, job_seeker_id: UUID, values: Values) -> ApplicationRead:
        if await self.find_application(values["job_id"], job_seeker_id):
            raise ConflictError("You have already applied to this job")
        application = _new(ApplicationRead, {**values, "job_seeker_id": job_seeker_id})
        self.applications[application.id] = application
        job = self.jobs[application.job_id]
        self.jobs[job.id] = job.model_copy(update={"applications_count": job.applications_count + 1})
        return application

    async def get_application(self, application_id: UUID) -> Optional[ApplicationRead]:
        return self.applications.get(application_id)

    async def find_application(
        self, job_id: UUID, job_seeker_id: UUID
    ) -> Optional[ApplicationRead]:
        for application in self.applications.values():
            if application.job_id == job_id and application.job_seeker_id == job_seeker_id:
                return application
        return None

    async def get_applications_by_job_seeker(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJob]:
        applications = _newest_first(
            a for a in self.applications.values() if a.job_seeker_id == job_seeker_id
        )
        return [
            ApplicationWithJob(
                application=a,
                job=self._job_with_employer(self.jobs[a.job_id]),
                job_seeker=self._job_seeker_with_user(self.job_seekers[a.job_seeker_id]),
            )
            for a in _limit(applications, limit)
        ]

    async def get_applications_by_employer(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJobSeeker]:
        applications = _newest_first(
            a for a in self.applications.values() if self.jobs[a.job_id].employer_id == employer_id
        )
        return [
            ApplicationWithJobSeeker(
                application=a,
                job=self.jobs[a.job_id],
                job_seeker=self._job_seeker_with_user(self.job_seekers[a.job_seeker_id]),
            )
            for a in _limit(applications, limit)
        ]

    async def update_application_status(
        self, application_id: UUID, status: str, notes: Optional[str] = None
    ) -> Optional[ApplicationRead]:
        application = self.applications.get(application_id)
        if application is None:
            return None
        updates: Values = {"status": status}
        if notes is not None:
            updates["notes"] = notes
        self.applications[application_id] = _replace(application, updates)
        return self.applications[application_id]

    # ==================== Interviews ====================

    async def create_interview(self, values: Values) -> InterviewRead:
        interview = _new(InterviewRead, values)
        self.interviews[interview.id] = interview
        return interview

    async def get_interview(self, interview_id: UUID) -> Optional[InterviewRead]:
        return self.interviews.get(interview_id)

    async def update_interview(
        self, interview_id: UUID, updates: Values, expected_status: str
    ) -> Optional[InterviewRead]:
        interview = self.interviews.get(interview_id)
        if interview is None:
            return None
        if interview.status != expected_status:
            raise ConflictError("Interview status has changed, reload and try again")
        self.interviews[interview_id] = _replace(interview, updates)
        return self.interviews[interview_id]

    async def get_interviews_by_job_seeker(self, job_seeker_id: UUID) -> List[InterviewWithDetails]:
        interviews = sorted(
            (i for i in self.interviews.values() if i.job_seeker_id == job_seeker_id),
            key=lambda i: i.scheduled_at,
        )
        return [self._interview_details(i) for i in interviews]

    async def get_interviews_by_employer(self, employer_id: UUID) -> List[InterviewWithDetails]:
        interviews = sorted(
            (i for i in self.interviews.values() if i.employer_id == employer_id),
            key=lambda i: i.scheduled_at,
        )
        return [self._interview_details(i) for i in interviews]

    # ==================== Reviews ====================

    async def create_review(self, job_seeker_id: UUID, values: Values) -> ReviewRead:
        review = _new(ReviewRead, {**values, "job_seeker_id": job_seeker_id})
        self.reviews[review.id] = review
        return review

    async def get_company_reviews(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ReviewWithDetails]:
        reviews = _newest_first(r for r in self.reviews.values() if r.employer_id == employer_id)
        result = []
        for review in _limit(reviews, limit):
            job_seeker = None
            if review.is_anonymous:
                review = review.model_copy(update={"job_seeker_id": None})
            else:
                job_seeker = self._job_seeker_with_user(self.job_seekers[review.job_seeker_id])
            result.append(
                ReviewWithDetails(
                    review=review, employer=self.employers[employer_id], job_seeker=job_seeker
                )
            )
        return result

    # ==================== Saved jobs & matches ====================

    async def save_job(
        self, job_seeker_id: UUID, job_id: UUID, notes: Optional[str] = None
    ) -> SavedJobRead:
        for saved in self.saved_jobs.values():
            if saved.job_seeker_id == job_seeker_id and saved.job_id == job_id:
                return saved
        saved = _new(SavedJobRead, {"job_seeker_id": job_seeker_id, "job_id": job_id, "notes": notes})
        self.saved_jobs[saved.id] = saved
        return saved

    async def unsave_job(self, job_seeker_id: UUID, job_id: UUID) -> bool:
        for key, saved in list(self.saved_jobs.items()):
            if saved.job_seeker_id == job_seeker_id and saved.job_id == job_id:
                del self.saved_jobs[key]
                return True
        return False

    async def get_saved_jobs(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[SavedJobWithJob]:
        saved_jobs = _newest_first(
            s for s in self.saved_jobs.values() if s.job_seeker_id == job_seeker_id
        )
        return [
            SavedJobWithJob(saved_job=s, job=self._job_with_employer(self.jobs[s.job_id]))
            for s in _limit(saved_jobs, limit)
        ]

    async def get_job_matches(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[JobMatchWithJob]:
        matches = sorted(
            (m for m in self.job_matches.values() if m.job_seeker_id == job_seeker_id),
            key=lambda m: m.match_score or 0,
            reverse=True,
        )
        return [
            JobMatchWithJob(match=m, job=self._job_with_employer(self.jobs[m.job_id]))
            for m in _limit(matches, limit)
        ]

    # ==================== Messages ====================

    async def create_message(self, sender_id: UUID, values: Values) -> MessageRead:
        message = _new(MessageRead, {**values, "sender_id": sender_id})
        self.messages[message.id] = message
        return message

    async def get_message(self, message_id: UUID) -> Optional[MessageRead]:
        return self.messages.get(message_id)

    async def mark_message_read(self, message_id: UUID) -> Optional[MessageRead]:
        message = self.messages.get(message_id)
        if message is None:
            return None
        self.messages[message_id] = _replace(message, {"is_read": True})
        return self.messages[message_id]

    async def get_conversations(self, user_id: UUID, limit: int = 50) -> List[MessageWithUsers]:
        messages = _newest_first(
            m for m in self.messages.values() if user_id in (m.sender_id, m.receiver_id)
        )
        return [self._message_with_users(m) for m in messages[:limit]]

    async def get_messages(self, user_id: UUID, other_user_id: UUID) -> List[MessageWithUsers]:
        pair = {user_id, other_user_id}
        messages = [
            m for m in self.messages.values() if {m.sender_id, m.receiver_id} == pair
        ]
        messages.sort(key=lambda m: m.created_at)
        return [self._message_with_users(m) for m in messages]

    # ==================== Skills ====================

    async def get_skills(self) -> List[SkillRead]:
        return sorted(self.skills.values(), key=lambda s: s.name)

    async def get_skill(self, skill_id: UUID) -> Optional[SkillRead]:
        return self.skills.get(skill_id)

    async def create_skill(self, values: Values) -> SkillRead:
        if any(s.name == values["name"] for s in self.skills.values()):
            raise ConflictError("Skill already exists")
        skill = _new(SkillRead, values)
        self.skills[skill.id] = skill
        return skill

    async def get_user_skills(self, user_id: UUID) -> List[UserSkillWithSkill]:
        user_skills = [us for us in self.user_skills.values() if us.user_id == user_id]
        return sorted(
            (UserSkillWithSkill(user_skill=us, skill=self.skills[us.skill_id]) for us in user_skills),
            key=lambda item: item.skill.name,
        )

    async def add_user_skill(self, user_id: UUID, values: Values) -> UserSkillRead:
        for user_skill in self.user_skills.values():
            if user_skill.user_id == user_id and user_skill.skill_id == values["skill_id"]:
                return user_skill
        user_skill = _new(UserSkillRead, {**values, "user_id": user_id})
        self.user_skills[user_skill.id] = user_skill
        return user_skill
