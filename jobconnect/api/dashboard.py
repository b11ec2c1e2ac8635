"""Dashboard endpoints."""

from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_session, get_dashboard_service
from jobconnect.core.sessions import SessionData
from jobconnect.schemas import EmployerDashboard, JobSeekerDashboard
from jobconnect.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/job-seeker", response_model=JobSeekerDashboard)
async def job_seeker_dashboard(
    session: SessionData = Depends(get_current_session),
    service: DashboardService = Depends(get_dashboard_service),
):
    return await service.job_seeker_dashboard(session.user_id)


@router.get("/employer", response_model=EmployerDashboard)
async def employer_dashboard(
    session: SessionData = Depends(get_current_session),
    service: DashboardService = Depends(get_dashboard_service),
):
    return await service.employer_dashboard(session.user_id)
