"""Security utilities: roles, password hashing, session tokens."""

import secrets
from enum import Enum
from typing import Optional

import bcrypt

from jobconnect.config import settings

# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_BYTES = 72


class Role(str, Enum):
    """Account roles. Fixed at registration."""

    JOB_SEEKER = "job_seeker"
    EMPLOYER = "employer"


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False


def generate_session_token() -> str:
    """Create an opaque, URL-safe session identifier."""
    return secrets.token_urlsafe(32)
