"""Dependency functions for FastAPI routes."""

from fastapi import Depends, Request

from jobconnect.config import Settings
from jobconnect.core.exceptions import AuthenticationError, ProfileNotFoundError
from jobconnect.core.sessions import SessionData, SessionStore
from jobconnect.schemas import EmployerWithUser, JobSeekerWithUser
from jobconnect.services.auth_service import AuthService
from jobconnect.services.dashboard_service import DashboardService
from jobconnect.storage import Storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_auth_service(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(storage, settings)


def get_dashboard_service(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> DashboardService:
    return DashboardService(storage, settings)


async def get_current_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> SessionData:
    """Resolve the session cookie or fail with 401."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise AuthenticationError()
    session = await store.get(token)
    if session is None:
        raise AuthenticationError()
    return session


async def get_current_job_seeker(
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
) -> JobSeekerWithUser:
    """The acting user's job seeker profile; 404 for employers."""
    profile = await storage.get_job_seeker(session.user_id)
    if profile is None:
        raise ProfileNotFoundError("Job seeker profile not found")
    return profile


async def get_current_employer(
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
) -> EmployerWithUser:
    """The acting user's employer profile; 404 for job seekers."""
    profile = await storage.get_employer(session.user_id)
    if profile is None:
        raise ProfileNotFoundError("Employer profile not found")
    return profile
