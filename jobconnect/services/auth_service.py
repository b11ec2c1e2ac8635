"""Registration and login."""

from datetime import datetime
from typing import Tuple, Union

import structlog
from starlette.concurrency import run_in_threadpool

from jobconnect.config import Settings
from jobconnect.core.exceptions import AuthenticationError, ConflictError
from jobconnect.core.security import Role, get_password_hash, verify_password
from jobconnect.schemas import (
    EmployerRead,
    EmployerRegistration,
    JobSeekerRead,
    JobSeekerRegistration,
    LoginRequest,
    UserRead,
)
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

Registration = Union[JobSeekerRegistration, EmployerRegistration]


class AuthService:
    """Creates accounts and checks credentials. Sessions are issued by the caller."""

    def __init__(self, storage: Storage, settings: Settings):
        self.storage = storage
        self.settings = settings

    async def _hash(self, password: str) -> str:
        # bcrypt is CPU bound; keep it off the event loop
        return await run_in_threadpool(get_password_hash, password, self.settings.BCRYPT_ROUNDS)

    async def _register(
        self, data: Registration, role: Role
    ) -> Tuple[UserRead, Union[JobSeekerRead, EmployerRead]]:
        if await self.storage.get_user_by_email(data.email):
            raise ConflictError("User already exists")
        if await self.storage.get_user_by_username(data.username):
            raise ConflictError("Username already taken")

        user_values = {
            **data.user_fields(),
            "role": role.value,
            "password_hash": await self._hash(data.password),
        }
        user, profile = await self.storage.create_user_with_profile(
            user_values, data.profile_fields()
        )
        logger.info("user_registered", user_id=str(user.id), role=role.value)
        return user, profile

    async def register_job_seeker(
        self, data: JobSeekerRegistration
    ) -> Tuple[UserRead, JobSeekerRead]:
        return await self._register(data, Role.JOB_SEEKER)

    async def register_employer(self, data: EmployerRegistration) -> Tuple[UserRead, EmployerRead]:
        return await self._register(data, Role.EMPLOYER)

    async def login(self, data: LoginRequest) -> UserRead:
        """Return the user for valid credentials.

        Unknown email, inactive account and wrong password all raise the same
        ``AuthenticationError`` so callers cannot tell them apart.
        """
        user = await self.storage.get_user_by_email(data.email)
        valid = user is not None and await run_in_threadpool(
            verify_password, data.password, user.password_hash
        )
        if not valid or not user.is_active:
            logger.warning("login_failed", email=data.email)
            raise AuthenticationError("Invalid credentials")

        user = await self.storage.update_user(user.id, {"last_login": datetime.utcnow()})
        logger.info("user_logged_in", user_id=str(user.id), role=user.role.value)
        return user
