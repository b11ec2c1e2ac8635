"""Server-side session stores.

A session maps an opaque token (carried in an HTTP-only cookie) to the
authenticated user id and role. Two implementations are provided:

- ``RedisSessionStore``: production store with connection pooling, TTL-based
  expiry and retry on transient connection errors.
- ``MemorySessionStore``: process-local store for development and tests.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple
from uuid import UUID

import redis.asyncio as redis
from pydantic import BaseModel
from redis.exceptions import ConnectionError, RedisError, TimeoutError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from jobconnect.config import Settings
from jobconnect.core.security import Role, generate_session_token

logger = logging.getLogger(__name__)


class SessionData(BaseModel):
    """Payload stored for an authenticated session."""

    user_id: UUID
    user_role: Role


class SessionStore(ABC):
    """Abstract session store."""

    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds

    @abstractmethod
    async def create(self, user_id: UUID, role: Role) -> str:
        """Create a session and return its token."""

    @abstractmethod
    async def get(self, token: str) -> Optional[SessionData]:
        """Return the live session for ``token`` or None."""

    @abstractmethod
    async def destroy(self, token: str) -> None:
        """Invalidate a session. Unknown tokens are ignored."""

    async def connect(self) -> None:
        """Open underlying connections, if any."""

    async def disconnect(self) -> None:
        """Release underlying connections, if any."""


class MemorySessionStore(SessionStore):
    """In-process session store."""

    def __init__(self, ttl_seconds: int):
        super().__init__(ttl_seconds)
        self._sessions: Dict[str, Tuple[SessionData, datetime]] = {}

    async def create(self, user_id: UUID, role: Role) -> str:
        token = generate_session_token()
        expires_at = datetime.utcnow() + timedelta(seconds=self.ttl_seconds)
        self._sessions[token] = (SessionData(user_id=user_id, user_role=role), expires_at)
        return token

    async def get(self, token: str) -> Optional[SessionData]:
        entry = self._sessions.get(token)
        if entry is None:
            return None
        data, expires_at = entry
        if expires_at <= datetime.utcnow():
            self._sessions.pop(token, None)
            return None
        return data

    async def destroy(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)


class RedisSessionStore(SessionStore):
    """Redis-backed session store with connection pooling and retry logic."""

    def __init__(self, settings: Settings):
        super().__init__(settings.SESSION_TTL_SECONDS)
        self.settings = settings
        self.key_prefix = settings.SESSION_KEY_PREFIX
        self._client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Create the connection pool and verify the server is reachable."""
        self._client = redis.Redis.from_url(
            self.settings.REDIS_URL,
            max_connections=self.settings.REDIS_MAX_CONNECTIONS,
            socket_timeout=self.settings.REDIS_SOCKET_TIMEOUT,
            decode_responses=True,
        )
        await self._client.ping()
        logger.info(f"Session store connected to Redis at {self.settings.REDIS_URL}")

    async def disconnect(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Session store Redis connection closed")

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{token}"

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("RedisSessionStore used before connect()")
        return self._client

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def create(self, user_id: UUID, role: Role) -> str:
        token = generate_session_token()
        payload = SessionData(user_id=user_id, user_role=role).model_dump_json()
        await self.client.setex(self._key(token), self.ttl_seconds, payload)
        return token

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def get(self, token: str) -> Optional[SessionData]:
        value = await self.client.get(self._key(token))
        if not value:
            return None
        try:
            return SessionData.model_validate(json.loads(value))
        except ValueError as e:
            logger.error(f"Corrupted session payload, dropping it: {e}")
            await self.client.delete(self._key(token))
            return None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        reraise=True,
    )
    async def destroy(self, token: str) -> None:
        try:
            await self.client.delete(self._key(token))
        except RedisError as e:
            logger.warning(f"Redis error deleting session: {e}")
            raise


def build_session_store(settings: Settings) -> SessionStore:
    """Create the session store selected by ``SESSION_BACKEND``."""
    backend = settings.SESSION_BACKEND.lower()
    if backend == "redis":
        return RedisSessionStore(settings)
    if backend == "memory":
        return MemorySessionStore(settings.SESSION_TTL_SECONDS)
    raise ValueError(f"Unknown SESSION_BACKEND: {settings.SESSION_BACKEND}")
