"""Application error taxonomy.

Every error maps to an HTTP status code and a human-readable message. The
exception handlers registered in ``jobconnect.main`` turn these into JSON
bodies of the form ``{"message": ...}``.
"""

from typing import List, Optional

from fastapi import status


class JobConnectError(Exception):
    """Base class for all expected application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(JobConnectError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, errors: List[dict], message: Optional[str] = None):
        self.errors = errors
        if message is None and errors:
            details = "; ".join(
                f"{e['field']}: {e['message']}" if e["field"] else e["message"]
                for e in errors
            )
            message = f"Validation failed: {details}"
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class AuthenticationError(JobConnectError):
    """Missing, unknown or expired session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class NotFoundError(JobConnectError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ProfileNotFoundError(NotFoundError):
    """The acting user has no profile of the required role."""

    default_message = "Profile not found"


class AuthorizationError(NotFoundError):
    """Authenticated, but not the owner. Reported as not found."""

    default_message = "Not found or unauthorized"


class ConflictError(JobConnectError):
    """Duplicate entity or a state change that is not allowed."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class UnhandledError(JobConnectError):
    """Unexpected backend failure; details are logged, not exposed."""
