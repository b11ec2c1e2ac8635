"""Storage interface.

Every entity operation the HTTP layer needs is a coroutine on ``Storage``.
Reads return pydantic records (``jobconnect.schemas``); joined reads return
the explicit composed types such as ``JobWithEmployer``. Writes take plain
dicts of column values that have already been validated.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from jobconnect.schemas import (
    ApplicationRead,
    ApplicationWithJob,
    ApplicationWithJobSeeker,
    EmployerRead,
    EmployerWithUser,
    InterviewRead,
    InterviewWithDetails,
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

Values = Dict[str, Any]


class Storage(ABC):
    """Abstract resource access layer."""

    async def close(self) -> None:
        """Release resources held by the backend."""

    # ==================== Users ====================

    @abstractmethod
    async def get_user(self, user_id: UUID) -> Optional[UserRead]:
        ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        ...

    @abstractmethod
    async def create_user_with_profile(
        self, user: Values, profile: Values
    ) -> Tuple[UserRead, Union[JobSeekerRead, EmployerRead]]:
        """Create a user and the profile matching ``user["role"]`` atomically.

        Raises ``ConflictError`` if the email or username is already taken.
        """

    @abstractmethod
    async def update_user(self, user_id: UUID, updates: Values) -> Optional[UserRead]:
        ...

    # ==================== Profiles ====================

    @abstractmethod
    async def get_job_seeker(self, user_id: UUID) -> Optional[JobSeekerWithUser]:
        """Job seeker profile owned by ``user_id``."""

    @abstractmethod
    async def get_job_seeker_by_id(self, job_seeker_id: UUID) -> Optional[JobSeekerWithUser]:
        ...

    @abstractmethod
    async def update_job_seeker_profile(
        self, job_seeker_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[JobSeekerWithUser]:
        """Update a job seeker and their user row in one transaction."""

    @abstractmethod
    async def get_employer(self, user_id: UUID) -> Optional[EmployerWithUser]:
        """Employer profile owned by ``user_id``."""

    @abstractmethod
    async def get_employer_by_id(self, employer_id: UUID) -> Optional[EmployerWithUser]:
        ...

    @abstractmethod
    async def update_employer_profile(
        self, employer_id: UUID, user_updates: Values, profile_updates: Values
    ) -> Optional[EmployerWithUser]:
        """Update an employer and their user row in one transaction."""

    # ==================== Jobs ====================

    @abstractmethod
    async def list_jobs(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        employment_type: Optional[str] = None,
    ) -> List[JobWithEmployer]:
        """Active jobs, newest first.

        ``search`` matches title or description and ``location`` matches the
        job location, both as case-insensitive substrings. ``employment_type``
        must match exactly.
        """

    @abstractmethod
    async def get_job(self, job_id: UUID) -> Optional[JobWithEmployer]:
        ...

    @abstractmethod
    async def get_jobs_by_employer(self, employer_id: UUID) -> List[JobRead]:
        """All jobs of an employer regardless of status, newest first."""

    @abstractmethod
    async def create_job(self, employer_id: UUID, values: Values) -> JobRead:
        ...

    @abstractmethod
    async def update_job(self, job_id: UUID, updates: Values) -> Optional[JobRead]:
        ...

    @abstractmethod
    async def delete_job(self, job_id: UUID) -> bool:
        """Delete a job with its applications, interviews, saved and matched rows."""

    # ==================== Applications ====================

    @abstractmethod
    async def create_application(self, job_seeker_id: UUID, values: Values) -> ApplicationRead:
        """Create an application and bump the job's ``applications_count``.

        Raises ``ConflictError`` if the job seeker already applied.
        """

    @abstractmethod
    async def get_application(self, application_id: UUID) -> Optional[ApplicationRead]:
        ...

    @abstractmethod
    async def find_application(
        self, job_id: UUID, job_seeker_id: UUID
    ) -> Optional[ApplicationRead]:
        ...

    @abstractmethod
    async def get_applications_by_job_seeker(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJob]:
        ...

    @abstractmethod
    async def get_applications_by_employer(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ApplicationWithJobSeeker]:
        ...

    @abstractmethod
    async def update_application_status(
        self, application_id: UUID, status: str, notes: Optional[str] = None
    ) -> Optional[ApplicationRead]:
        ...

    # ==================== Interviews ====================

    @abstractmethod
    async def create_interview(self, values: Values) -> InterviewRead:
        ...

    @abstractmethod
    async def get_interview(self, interview_id: UUID) -> Optional[InterviewRead]:
        ...

    @abstractmethod
    async def update_interview(
        self, interview_id: UUID, updates: Values, expected_status: str
    ) -> Optional[InterviewRead]:
        """Apply ``updates`` only while the interview is still in ``expected_status``.

        Raises ``ConflictError`` if the status changed in the meantime.
        """

    @abstractmethod
    async def get_interviews_by_job_seeker(self, job_seeker_id: UUID) -> List[InterviewWithDetails]:
        """Interviews of a job seeker, earliest first."""

    @abstractmethod
    async def get_interviews_by_employer(self, employer_id: UUID) -> List[InterviewWithDetails]:
        """Interviews of an employer, earliest first."""

    # ==================== Reviews ====================

    @abstractmethod
    async def create_review(self, job_seeker_id: UUID, values: Values) -> ReviewRead:
        ...

    @abstractmethod
    async def get_company_reviews(
        self, employer_id: UUID, limit: Optional[int] = None
    ) -> List[ReviewWithDetails]:
        """Reviews of an employer, newest first. Anonymous reviewers are hidden."""

    # ==================== Saved jobs & matches ====================

    @abstractmethod
    async def save_job(
        self, job_seeker_id: UUID, job_id: UUID, notes: Optional[str] = None
    ) -> SavedJobRead:
        """Bookmark a job. Saving an already saved job returns the existing row."""

    @abstractmethod
    async def unsave_job(self, job_seeker_id: UUID, job_id: UUID) -> bool:
        ...

    @abstractmethod
    async def get_saved_jobs(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[SavedJobWithJob]:
        ...

    @abstractmethod
    async def get_job_matches(
        self, job_seeker_id: UUID, limit: Optional[int] = None
    ) -> List[JobMatchWithJob]:
        """Stored job recommendations, best score first."""

    # ==================== Messages ====================

    @abstractmethod
    async def create_message(self, sender_id: UUID, values: Values) -> MessageRead:
        ...

    @abstractmethod
    async def get_message(self, message_id: UUID) -> Optional[MessageRead]:
        ...

    @abstractmethod
    async def mark_message_read(self, message_id: UUID) -> Optional[MessageRead]:
        ...

    @abstractmethod
    async def get_conversations(self, user_id: UUID, limit: int = 50) -> List[MessageWithUsers]:
        """Latest messages sent or received by ``user_id``, newest first."""

    @abstractmethod
    async def get_messages(self, user_id: UUID, other_user_id: UUID) -> List[MessageWithUsers]:
        """Thread between two users, oldest first."""

    # ==================== Skills ====================

    @abstractmethod
    async def get_skills(self) -> List[SkillRead]:
        ...

    @abstractmethod
    async def get_skill(self, skill_id: UUID) -> Optional[SkillRead]:
        ...

    @abstractmethod
    async def create_skill(self, values: Values) -> SkillRead:
        """Raises ``ConflictError`` if the name is taken."""

    @abstractmethod
    async def get_user_skills(self, user_id: UUID) -> List[UserSkillWithSkill]:
        ...

    @abstractmethod
    async def add_user_skill(self, user_id: UUID, values: Values) -> UserSkillRead:
        """Attach a skill to a user. Adding it twice returns the existing row."""
