"""SQLAlchemy (async) storage backend.

Every public method opens its own ``AsyncSession`` and commits at most once,
so multi-row writes such as user + profile or application + job counter are
atomic. Joined reads use explicit ``select(...).join(...)`` statements and
convert rows into the composed schema records.
"""

import logging
from typing import List, Optional, Tuple, Type, Union
from uuid import UUID

from sqlalchemy import and_, delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import aliased

from jobconnect.core.exceptions import ConflictError
from jobconnect.core.security import Role
from jobconnect.db.base import Base, utcnow
from jobconnect.db.session import create_session_factory, init_db
from jobconnect.models import (
    Application,
    CompanyReview,
    Employer,
    Interview,
    Job,
    JobMatch,
    JobSeeker,
    Message,
    SavedJob,
    Skill,
    User,
    UserSkill,
)
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
from jobconnect.schemas.common import RecordModel
from jobconnect.schemas.enums import JobStatus
from jobconnect.storage.base import Storage, Values

logger = logging.getLogger(__name__)

# Users appear twice in several joins
EmployerUser = aliased(User, name="employer_user")
SeekerUser = aliased(User, name="seeker_user")
Sender = aliased(User, name="sender")
Receiver = aliased(User, name="receiver")


def _job_seeker_with_user(job_seeker: JobSeeker, user: User) -> JobSeekerWithUser:
    return JobSeekerWithUser(
        job_seeker=JobSeekerRead.model_validate(job_seeker), user=UserRead.model_validate(user)
    )


def _employer_with_user(employer: Employer, user: User) -> EmployerWithUser:
    return EmployerWithUser(
        employer=EmployerRead.model_validate(employer), user=UserRead.model_validate(user)
    )


def _job_with_employer(job: Job, employer: Employer, user: User) -> JobWithEmployer:
    return JobWithEmployer(
        job=JobRead.model_validate(job), employer=_employer_with_user(employer, user)
    )


def _jobs_with_employer():
    """``select(Job, Employer, User)`` joined through the posting employer."""
    return (
        select(Job, Employer, EmployerUser)
        .join(Employer, Job.employer_id == Employer.id)
        .join(EmployerUser, Employer.user_id == EmployerUser.id)
    )


def _interviews_with_details():
    return (
        select(Interview, Application, Job, Employer, EmployerUser, JobSeeker, SeekerUser)
        .join(Application, Interview.application_id == Application.id)
        .join(Job, Application.job_id == Job.id)
        .join(Employer, Interview.employer_id == Employer.id)
        .join(EmployerUser, Employer.user_id == EmployerUser.id)
        .join(JobSeeker, Interview.job_seeker_id == JobSeeker.id)
        .join(SeekerUser, JobSeeker.user_id == SeekerUser.id)
    )


def _messages_with_users():
    return (
        select(Message, Sender, Receiver)
        .join(Sender, Message.sender_id == Sender.id)
        .join(Receiver, Message.receiver_id == Receiver.id)
    )


class DatabaseStorage(Storage):
    """Storage over a relational database via SQLAlchemy's asyncio extension."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    async def create_tables(self) -> None:
        await init_db(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    # ==================== Generic helpers ====================

    async def _get(
        self, model: Type[Base], row_id: UUID, record: Type[RecordModel]
    ) -> Optional[RecordModel]:
        async with self.session_factory() as session:
            row = await session.get(model, row_id)
            return record.model_validate(row) if row else None

    async def _update(
        self, model: Type[Base], row_id: UUID, updates: Values, record: Type[RecordModel]
    ) -> Optional[RecordModel]:
        async with self.session_factory() as session:
            row = await session.get(model, row_id)
            if row is None:
                return None
            for key, value in updates.items():
                setattr(row, key, value)
            row.touch()
            await session.commit()
            return record.model_validate(row)

    # ==================== Users ====================

    async def get_user(self, user_id: UUID) -> Optional[UserRead]:
        return await self._get(User, user_id, UserRead)

    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        async with self.session_factory() as session:
            user = await session.scalar(select(User).where(User.email == email))
            return UserRead.model_validate(user) if user else None

    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        async with self.session_factory() as session:
            user = await session.scalar(select(User).where(User.username == username))
            return UserRead.model_validate(user) if user else None

    async def create_user_with_profile(
        self, user: Values, profile: Values
    ) -> Tuple[UserRead, Union[JobSeekerRead, EmployerRead]]:
        is_job_seeker = Role(user["role"]) == Role.JOB_SEEKER
        profile_model = JobSeeker if is_job_seeker else Employer
        profile_record = JobSeekerRead if is_job_seeker else EmployerRead

        async with self.session_factory() as session:
            try:
                user_row = User(**user)
                session.add(user_row)
                await session.flush()

                profile_row = profile_model(**profile, user_id=user_row.id)
                session.add(profile_row)
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.warning(f"Duplicate registration for {user['email']}: {e.orig}")
                raise ConflictError("User already exists") from e

            return UserRead.model_validate(user_row), profile_record.model_validate(profile_row)

    async def update_user(self, user_id: UUID, updates: Values) -> Optional[UserRead]:
        return await self._update(User, user_id, updates, UserRead)

    # ==================== Profiles ====================

    async def _job_seeker_where(self, condition) -> Optional[JobSeekerWithUser]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(JobSeeker, User).join(User, JobSeeker.user_id == User.id).where(condition)
            )
            row = result.first()
            return _job_seeker_with_user(*row) if row else None

    async def _employer_where(self, condition) -> Optional[EmployerWithUser]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(Employer, User).join(User, Employer.user_id == User.id).where(condition)
            )
            row = result.first()
            return _employer_with_user(*row) if row else None

    async def get_job_seeker(self, user_id: UUID) -> Optional[JobSeekerWithUser]:
        return await self._job_seeker_where(JobSeeker.user_id == user_id)

    async def get_job_seeker_by_id(self, job_seeker_id: UUID) -> Optional[JobSeekerWithUser]:
        return await self._job_seeker_where(JobSeeker.id == job_seeker_id)

    async def _update_profile(
        self, model: Type[Base], profile_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[Tuple[Base, User]]:
        async with self.session_factory() as session:
            profile = await session.get(model, profile_id)
            if profile is None:
                return None
            user = await session.get(User, profile.user_id)
            now = utcnow()
            for row, updates in ((user, user_updates), (profile, profile_updates)):
                if not updates:
                    continue
                for key, value in updates.items():
                    setattr(row, key, value)
                row.touch(now)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.warning(f"Profile update rejected for {profile_id}: {e.orig}")
                raise ConflictError("Profile update conflicts with existing data") from e
            return profile, user

    async def update_job_seeker_profile(
        self, job_seeker_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[JobSeekerWithUser]:
        rows = await self._update_profile(JobSeeker, job_seeker_id, user_updates, profile_updates)
        return _job_seeker_with_user(*rows) if rows else None

    async def get_employer(self, user_id: UUID) -> Optional[EmployerWithUser]:
        return await self._employer_where(Employer.user_id == user_id)

    async def get_employer_by_id(self, employer_id: UUID) -> Optional[EmployerWithUser]:
        return await self._employer_where(Employer.id == employer_id)

    async def update_employer_profile(
        self, employer_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[EmployerWithUser]:
        rows = await self._update_profile(Employer, employer_id, user_updates, profile_updates)
        return _employer_with_user(*rows) if rows else None

    # ==================== Jobs ====================

    async def list_jobs(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        employment_type: Optional[str] = None,
    ) -> List[JobWithEmployer]:
        query = _jobs_with_employer().where(Job.status == JobStatus.ACTIVE.value)
        if search:
            query = query.where(
                or_(
                    Job.title.icontains(search, autoescape=True),
                    Job.description.icontains(search, autoescape=True),
                )
            )
        if location:
            query = query.where(Job.location.icontains(location, autoescape=True))
        if employment_type:
            query = query.where(Job.employment_type == employment_type)
        query = query.order_by(Job.created_at.desc())

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [_job_with_employer(*row) for row in result.all()]

    async def get_job(self, job_id: UUID) -> Optional[JobWithEmployer]:
        async with self.session_factory() as session:
            result = await session.execute(_jobs_with_employer().where(Job.id == job_id))
            row = result.first()
            return _job_with_employer(*row) if row else None

    async def get_jobs_by_employer(self, employer_id: UUID) -> List[JobRead]:
        async with self.session_factory() as session:
            result = await session.scalars(
                select(Job).where(Job.employer_id == employer_id).order_by(Job.created_at.desc())
            )
            return [JobRead.model_validate(job) for job in result.all()]

    async def create_job(self, employer_id: UUID, values: Values) -> JobRead:
        async with self.session_factory() as session:
            job = Job(**values, employer_id=employer_id)
            session.add(job)
            await session.commit()
            return JobRead.model_validate(job)

    async def update_job(self, job_id: UUID, updates: Values) -> Optional[JobRead]:
        return await self._update(Job, job_id, updates, JobRead)

    async def delete_job(self, job_id: UUID) -> bool:
        # Applications, interviews, saved jobs and matches go via ON DELETE CASCADE
        async with self.session_factory() as session:
            result = await session.execute(delete(Job).where(Job.id == job_id))
            await session.commit()
            return result.rowcount > 0

    # ==================== Applications ====================

    async def create_application(self, job_seeker_id: UUID, values: Values) -> ApplicationRead:
        async with self.session_factory() as session:
            try:
                application = Application(**values, job_seeker_id=job_seeker_id)
                session.add(application)
                await session.flush()
                await session.execute(
                    update(Job)
                    .where(Job.id == application.job_id)
                    .values(applications_count=Job.applications_count + 1)
                )
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError("You have already applied to this job") from e
            return ApplicationRead.model_validate(application)

    async def get_application(self, application_id: UUID) -> Optional[ApplicationRead]:
        return await self._get(Application, application_id, ApplicationRead)

    async def find_application(
        self, job_id: UUID, job_seeker_id: UUID
    ) -> Optional[ApplicationRead]:
        async with self.session_factory() as session:
            application = await session.scalar(
                select(Application).where(
                    Application.job_id == job_id, Application.job_seeker_id == job_seeker_id
                )
            )
            return ApplicationRead.model_validate(application) if application else None

    async def get_applications_by_job_seeker(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJob]:
        query = (
            select(Application, Job, Employer, EmployerUser, JobSeeker, SeekerUser)
            .join(Job, Application.job_id == Job.id)
            .join(Employer, Job.employer_id == Employer.id)
            .join(EmployerUser, Employer.user_id == EmployerUser.id)
            .join(JobSeeker, Application.job_seeker_id == JobSeeker.id)
            .join(SeekerUser, JobSeeker.user_id == SeekerUser.id)
            .where(Application.job_seeker_id == job_seeker_id)
            .order_by(Application.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                ApplicationWithJob(
                    application=ApplicationRead.model_validate(application),
                    job=_job_with_employer(job, employer, employer_user),
                    job_seeker=_job_seeker_with_user(job_seeker, seeker_user),
                )
                for application, job, employer, employer_user, job_seeker, seeker_user in result.all()
            ]

    async def get_applications_by_employer(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJobSeeker]:
        query = (
            select(Application, Job, JobSeeker, SeekerUser)
            .join(Job, Application.job_id == Job.id)
            .join(JobSeeker, Application.job_seeker_id == JobSeeker.id)
            .join(SeekerUser, JobSeeker.user_id == SeekerUser.id)
            .where(Job.employer_id == employer_id)
            .order_by(Application.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                ApplicationWithJobSeeker(
                    application=ApplicationRead.model_validate(application),
                    job=JobRead.model_validate(job),
                    job_seeker=_job_seeker_with_user(job_seeker, seeker_user),
                )
                for application, job, job_seeker, seeker_user in result.all()
            ]

    async def update_application_status(
        self, application_id: UUID, status: str, notes: Optional[str] = None
    ) -> Optional[ApplicationRead]:
        updates: Values = {"status": status}
        if notes is not None:
            updates["notes"] = notes
        return await self._update(Application, application_id, updates, ApplicationRead)

    # ==================== Interviews ====================

    async def create_interview(self, values: Values) -> InterviewRead:
        async with self.session_factory() as session:
            interview = Interview(**values)
            session.add(interview)
            await session.commit()
            return InterviewRead.model_validate(interview)

    async def get_interview(self, interview_id: UUID) -> Optional[InterviewRead]:
        return await self._get(Interview, interview_id, InterviewRead)

    async def update_interview(
        self, interview_id: UUID, updates: Values, expected_status: str
    ) -> Optional[InterviewRead]:
        async with self.session_factory() as session:
            result = await session.execute(
                update(Interview)
                .where(Interview.id == interview_id, Interview.status == expected_status)
                .values(**updates, updated_at=utcnow())
            )
            if result.rowcount == 0:
                await session.rollback()
                if await session.get(Interview, interview_id) is None:
                    return None
                raise ConflictError("Interview status has changed, reload and try again")
            await session.commit()
            interview = await session.get(Interview, interview_id, populate_existing=True)
            return InterviewRead.model_validate(interview)

    async def _interviews_where(self, condition) -> List[InterviewWithDetails]:
        query = _interviews_with_details().where(condition).order_by(Interview.scheduled_at.asc())
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                InterviewWithDetails(
                    interview=InterviewRead.model_validate(interview),
                    application=ApplicationRead.model_validate(application),
                    job=JobRead.model_validate(job),
                    employer=_employer_with_user(employer, employer_user),
                    job_seeker=_job_seeker_with_user(job_seeker, seeker_user),
                )
                for interview, application, job, employer, employer_user, job_seeker, seeker_user in result.all()
            ]

    async def get_interviews_by_job_seeker(self, job_seeker_id: UUID) -> List[InterviewWithDetails]:
        return await self._interviews_where(Interview.job_seeker_id == job_seeker_id)

    async def get_interviews_by_employer(self, employer_id: UUID) -> List[InterviewWithDetails]:
        return await self._interviews_where(Interview.employer_id == employer_id)

    # ==================== Reviews ====================

    async def create_review(self, job_seeker_id: UUID, values: Values) -> ReviewRead:
        async with self.session_factory() as session:
            review = CompanyReview(**values, job_seeker_id=job_seeker_id)
            session.add(review)
            await session.commit()
            return ReviewRead.model_validate(review)

    async def get_company_reviews(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ReviewWithDetails]:
        query = (
            select(CompanyReview, Employer, JobSeeker, SeekerUser)
            .join(Employer, CompanyReview.employer_id == Employer.id)
            .join(JobSeeker, CompanyReview.job_seeker_id == JobSeeker.id)
            .join(SeekerUser, JobSeeker.user_id == SeekerUser.id)
            .where(CompanyReview.employer_id == employer_id)
            .order_by(CompanyReview.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            reviews = []
            for review, employer, job_seeker, seeker_user in result.all():
                record = ReviewRead.model_validate(review)
                reviewer = None
                if record.is_anonymous:
                    record = record.model_copy(update={"job_seeker_id": None})
                else:
                    reviewer = _job_seeker_with_user(job_seeker, seeker_user)
                reviews.append(
                    ReviewWithDetails(
                        review=record,
                        employer=EmployerRead.model_validate(employer),
                        job_seeker=reviewer,
                    )
                )
            return reviews

    # ==================== Saved jobs & matches ====================

    async def save_job(
        self, job_seeker_id: UUID, job_id: UUID, notes: Optional[str] = None
    ) -> SavedJobRead:
        lookup = select(SavedJob).where(
            SavedJob.job_seeker_id == job_seeker_id, SavedJob.job_id == job_id
        )
        async with self.session_factory() as session:
            existing = await session.scalar(lookup)
            if existing:
                return SavedJobRead.model_validate(existing)

            saved = SavedJob(job_seeker_id=job_seeker_id, job_id=job_id, notes=notes)
            session.add(saved)
            try:
                await session.commit()
            except IntegrityError:
                # Saved concurrently by another request
                await session.rollback()
                saved = await session.scalar(lookup)
            return SavedJobRead.model_validate(saved)

    async def unsave_job(self, job_seeker_id: UUID, job_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(SavedJob).where(
                    SavedJob.job_seeker_id == job_seeker_id, SavedJob.job_id == job_id
                )
            )
            await session.commit()
            return result.rowcount > 0

    async def get_saved_jobs(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[SavedJobWithJob]:
        query = (
            _jobs_with_employer()
            .add_columns(SavedJob)
            .join(SavedJob, SavedJob.job_id == Job.id)
            .where(SavedJob.job_seeker_id == job_seeker_id)
            .order_by(SavedJob.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                SavedJobWithJob(
                    saved_job=SavedJobRead.model_validate(saved),
                    job=_job_with_employer(job, employer, user),
                )
                for job, employer, user, saved in result.all()
            ]

    async def get_job_matches(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[JobMatchWithJob]:
        query = (
            _jobs_with_employer()
            .add_columns(JobMatch)
            .join(JobMatch, JobMatch.job_id == Job.id)
            .where(JobMatch.job_seeker_id == job_seeker_id)
            .order_by(JobMatch.match_score.desc().nulls_last())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                JobMatchWithJob(
                    match=JobMatchRead.model_validate(match),
                    job=_job_with_employer(job, employer, user),
                )
                for job, employer, user, match in result.all()
            ]

    # ==================== Messages ====================

    async def create_message(self, sender_id: UUID, values: Values) -> MessageRead:
        async with self.session_factory() as session:
            message = Message(**values, sender_id=sender_id)
            session.add(message)
            await session.commit()
            return MessageRead.model_validate(message)

    async def get_message(self, message_id: UUID) -> Optional[MessageRead]:
        return await self._get(Message, message_id, MessageRead)

    async def mark_message_read(self, message_id: UUID) -> Optional[MessageRead]:
        return await self._update(Message, message_id, {"is_read": True}, MessageRead)

    async def _messages(self, query) -> List[MessageWithUsers]:
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                MessageWithUsers(
                    message=MessageRead.model_validate(message),
                    sender=UserRead.model_validate(sender),
                    receiver=UserRead.model_validate(receiver),
                )
                for message, sender, receiver in result.all()
            ]

    async def get_conversations(self, user_id: UUID, limit: int = 50) -> List[MessageWithUsers]:
        return await self._messages(
            _messages_with_users()
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .order_by(Message.created_at.desc())
            .limit(limit)
        )

    async def get_messages(self, user_id: UUID, other_user_id: UUID) -> List[MessageWithUsers]:
        return await self._messages(
            _messages_with_users()
            .where(
                or_(
                    and_(Message.sender_id == user_id, Message.receiver_id == other_user_id),
                    and_(Message.sender_id == other_user_id, Message.receiver_id == user_id),
                )
            )
            .order_by(Message.created_at.asc())
        )

    # ==================== Skills ====================

    async def get_skills(self) -> List[SkillRead]:
        async with self.session_factory() as session:
            result = await session.scalars(select(Skill).order_by(Skill.name))
            return [SkillRead.model_validate(skill) for skill in result.all()]

    async def get_skill(self, skill_id: UUID) -> Optional[SkillRead]:
        return await self._get(Skill, skill_id, SkillRead)

    async def create_skill(self, values: Values) -> SkillRead:
        async with self.session_factory() as session:
            skill = Skill(**values)
            session.add(skill)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError("Skill already exists") from e
            return SkillRead.model_validate(skill)

    async def get_user_skills(self, user_id: UUID) -> List[UserSkillWithSkill]:
        query = (
            select(UserSkill, Skill)
            .join(Skill, UserSkill.skill_id == Skill.id)
            .where(UserSkill.user_id == user_id)
            .order_by(Skill.name)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [
                UserSkillWithSkill(
                    user_skill=UserSkillRead.model_validate(user_skill),
                    skill=SkillRead.model_validate(skill),
                )
                for user_skill, skill in result.all()
            ]

    async def add_user_skill(self, user_id: UUID, values: Values) -> UserSkillRead:
        lookup = select(UserSkill).where(
            UserSkill.user_id == user_id, UserSkill.skill_id == values["skill_id"]
        )
        async with self.session_factory() as session:
            existing = await session.scalar(lookup)
            if existing:
                return UserSkillRead.model_validate(existing)

            user_skill = UserSkill(**values, user_id=user_id)
            session.add(user_skill)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                user_skill = await session.scalar(lookup)
            return UserSkillRead.model_validate(user_skill)
