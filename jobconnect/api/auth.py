"""Authentication endpoints."""

import structlog
from fastapi import APIRouter, Depends, Request, Response

from jobconnect.config import Settings
from jobconnect.core.deps import (
    get_auth_service,
    get_current_session,
    get_session_store,
    get_settings,
    get_storage,
)
from jobconnect.core.exceptions import NotFoundError
from jobconnect.core.security import Role
from jobconnect.core.sessions import SessionData, SessionStore
from jobconnect.schemas import (
    AuthResponse,
    CurrentUserResponse,
    EmployerRegistration,
    JobSeekerRegistration,
    LoginRequest,
    SuccessResponse,
    UserRead,
)
from jobconnect.services.auth_service import AuthService
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


async def start_session(
    request: Request,
    response: Response,
    store: SessionStore,
    settings: Settings,
    user: UserRead,
) -> None:
    """Issue a new session cookie, revoking any session the client presented."""
    previous = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if previous:
        await store.destroy(previous)

    token = await store.create(user.id, user.role)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/register/job-seeker", response_model=AuthResponse)
async def register_job_seeker(
    data: JobSeekerRegistration,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """Create a job seeker account and log it in."""
    user, _ = await auth.register_job_seeker(data)
    await start_session(request, response, store, settings, user)
    return AuthResponse(role=user.role)


@router.post("/register/employer", response_model=AuthResponse)
async def register_employer(
    data: EmployerRegistration,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """Create an employer account and log it in."""
    user, _ = await auth.register_employer(data)
    await start_session(request, response, store, settings, user)
    return AuthResponse(role=user.role)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """Login with email and password."""
    user = await auth.login(data)
    await start_session(request, response, store, settings, user)
    return AuthResponse(role=user.role)


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    request: Request,
    response: Response,
    session: SessionData = Depends(get_current_session),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """Destroy the current session and clear the cookie."""
    await store.destroy(request.cookies[settings.SESSION_COOKIE_NAME])
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    logger.info("user_logged_out", user_id=str(session.user_id))
    return SuccessResponse()


@router.get("/user", response_model=CurrentUserResponse)
async def get_current_user(
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    """Return the logged-in user and their role profile."""
    user = await storage.get_user(session.user_id)
    if user is None:
        raise NotFoundError("User not found")

    profile = None
    if user.role == Role.JOB_SEEKER:
        job_seeker = await storage.get_job_seeker(user.id)
        profile = job_seeker.job_seeker if job_seeker else None
    else:
        employer = await storage.get_employer(user.id)
        profile = employer.employer if employer else None

    return CurrentUserResponse(user=user, profile=profile)
